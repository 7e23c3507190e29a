"""r-component, q-component and f-component of a URN

See https://datatracker.ietf.org/doc/html/rfc8141#section-2.3

    rqf-trailer = [ "?+" r-component ] [ "?=" q-component ] [ "#" f-component ]
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .charsets import (
    FRAGMENT_INDICATOR,
    QUERY_INDICATOR,
    RESOLUTION_INDICATOR,
    RQF_INDICATORS,
)

logger = logging.getLogger(__name__)


def find_indicator(value: str, start: int = 0,
                   indicators: Sequence[str] = RQF_INDICATORS) -> Optional[int]:
    """Find the earliest position of any of the indicators at or after start

    Indicators are matched as literal substrings. Returns None if none occurs.
    """
    positions = [pos for pos in (value.find(i, start) for i in indicators) if pos != -1]
    return min(positions) if positions else None


@dataclass(frozen=True)
class ParameterItem:
    """A name=value pair from an r- or q-component"""
    name: str
    value: str


def parameters(payload: str) -> List[ParameterItem]:
    """Split a component payload into parameter items

    Pairs are separated by '&' and name/value by '='. Pieces that do not
    yield exactly a name and a value are dropped.
    """
    items = []
    for piece in payload.split("&"):
        if not piece:
            continue
        parts = [p for p in piece.split("=") if p]
        if len(parts) != 2:
            logger.debug("Dropping malformed parameter '%s'", piece)
            continue
        items.append(ParameterItem(name=parts[0], value=parts[1]))
    return items


@dataclass(frozen=True)
class RQF:
    """Optional trailer of a URN

    A field is None when its indicator is absent and '' when the indicator is
    present with an empty payload. At least one field is always present.
    """
    resolution: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    def __post_init__(self):
        if self.resolution is None and self.query is None and self.fragment is None:
            raise ValueError("RQF requires at least one of resolution, query or fragment")

    @classmethod
    def from_fields(cls, resolution: Optional[str] = None, query: Optional[str] = None,
                    fragment: Optional[str] = None) -> Optional['RQF']:
        """Create an RQF, or None if no field is present"""
        if resolution is None and query is None and fragment is None:
            return None
        return cls(resolution, query, fragment)

    @classmethod
    def from_string(cls, s: Optional[str]) -> Optional['RQF']:
        """Parse a trailer such as `?+res?=key=value#frag`

        Parsing starts at the earliest indicator. Components are read in the
        canonical order resolution, query, fragment: a payload ends at the
        next indicator of a later component, so an indicator that appears out
        of order stays part of the preceding payload.
        Returns None if no indicator is found.
        """
        if s is None:
            return None

        pos = find_indicator(s)
        if pos is None:
            if s:
                logger.debug("Ignoring trailer without r/q/f indicator: '%s'", s)
            return None

        fields = {}
        for i, indicator in enumerate(RQF_INDICATORS):
            if not s.startswith(indicator, pos):
                continue
            pos += len(indicator)
            end = find_indicator(s, pos, RQF_INDICATORS[i + 1:])
            if end is None:
                end = len(s)
            fields[indicator] = s[pos:end]
            pos = end

        return cls.from_fields(
            resolution=fields.get(RESOLUTION_INDICATOR),
            query=fields.get(QUERY_INDICATOR),
            fragment=fields.get(FRAGMENT_INDICATOR),
        )

    @property
    def resolution_items(self) -> List[ParameterItem]:
        return parameters(self.resolution or "")

    @property
    def query_items(self) -> List[ParameterItem]:
        return parameters(self.query or "")

    def to_string(self) -> str:
        """Re-emit the present components in canonical order"""
        components = (
            (RESOLUTION_INDICATOR, self.resolution),
            (QUERY_INDICATOR, self.query),
            (FRAGMENT_INDICATOR, self.fragment),
        )
        return "".join(f"{indicator}{payload}" for indicator, payload in components
                       if payload is not None)

    def __str__(self) -> str:
        return self.to_string()
