"""Uniform Resource Names (URNs)

See https://datatracker.ietf.org/doc/html/rfc8141

    urn = "urn" ":" NID ":" NSS [ rqf-trailer ]
"""

from typing import Optional

from .charsets import DEFAULT_SCHEME, SEPARATOR
from .errors import InsufficientNumberOfURNComponentsError, ParsingError
from .parts import NID, NSS, Scheme
from .rqf import RQF, find_indicator


class URNComponents:
    """A parsed and normalized URN

    Examples:
    - `urn:example:a123,z456`
    - `urn:uuid:D1BB9200-A3E6-4C73-B8FB-E8C0423CE99C`
    - `urn:example:weather?=op=map&lat=39.56&lon=-104.85#day`

    Two URNs compare equal when they are URN-equivalent (RFC 8141 section 3):
    only the assigned name is compared, the r/q/f trailer is ignored.
    """

    __slots__ = ("_scheme", "_nid", "_nss", "_rqf")

    def __init__(self, *, scheme: str = DEFAULT_SCHEME, nid: str, nss: str,
                 rqf: Optional[str] = None):
        """Create a URN from its parts

        Parts are keyword-only. `rqf` is a raw trailer such as
        `?=key=value#root`. Parts are validated in order (scheme, NID, NSS)
        and the first failure is raised.
        """
        object.__setattr__(self, "_scheme", Scheme.from_string(scheme))
        object.__setattr__(self, "_nid", NID.from_string(nid))
        object.__setattr__(self, "_nss", NSS.from_string(nss))
        object.__setattr__(self, "_rqf", RQF.from_string(rqf))

    def __setattr__(self, name, value):
        raise AttributeError("URNComponents is immutable")

    @classmethod
    def from_string(cls, s: str) -> 'URNComponents':
        """Parse a URN string

        The scheme ends at the first ':' and the NID at the second one.
        The NSS runs up to the earliest '?+', '?=' or '#', which starts the
        trailer.
        """
        scheme_end = s.find(SEPARATOR)
        nid_end = s.find(SEPARATOR, scheme_end + 1) if scheme_end != -1 else -1
        if nid_end == -1:
            raise InsufficientNumberOfURNComponentsError(
                f"URN must have a scheme, a namespace identifier and a namespace specific string: '{s}'")

        nss_start = nid_end + len(SEPARATOR)
        nss_end = find_indicator(s, nss_start)
        if nss_end is None:
            nss_end = len(s)

        return cls(
            scheme=s[:scheme_end],
            nid=s[scheme_end + len(SEPARATOR):nid_end],
            nss=s[nss_start:nss_end],
            rqf=s[nss_end:],
        )

    @classmethod
    def is_valid(cls, s: str) -> bool:
        """Check if s parses as a URN"""
        try:
            cls.from_string(s)
        except ParsingError:
            return False
        return True

    @staticmethod
    def canonical(urn: str) -> str:
        """Get the normalized form of a URN string"""
        return URNComponents.from_string(urn).to_string()

    @staticmethod
    def canonical_option(urn: Optional[str]) -> Optional[str]:
        """Get the normalized form of an optional URN string"""
        if urn is not None:
            return URNComponents.canonical(urn)
        else:
            return None

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    @property
    def nid(self) -> NID:
        return self._nid

    @property
    def nss(self) -> NSS:
        return self._nss

    @property
    def rqf(self) -> Optional[RQF]:
        return self._rqf

    @property
    def assigned_name(self) -> str:
        """The `scheme:NID:NSS` part of the URN, used for URN-equivalence"""
        return SEPARATOR.join((self._scheme.value, self._nid.value, self._nss.value))

    def with_rqf(self, rqf: Optional[str]) -> 'URNComponents':
        """Return a copy of this URN with another trailer"""
        return URNComponents(
            scheme=self._scheme.value,
            nid=self._nid.value,
            nss=self._nss.value,
            rqf=rqf,
        )

    def to_string(self) -> str:
        """Get the normalized string representation, trailer included"""
        if self._rqf is None:
            return self.assigned_name
        return f"{self.assigned_name}{self._rqf}"

    def to_json_value(self) -> str:
        return self.to_string()

    @classmethod
    def from_json_value(cls, value: object) -> 'URNComponents':
        """Create a URN from a value decoded out of a JSON document"""
        if not isinstance(value, str):
            raise TypeError(f"Expected a string for a URN, got {type(value).__name__}")
        return cls.from_string(value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"URNComponents('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URNComponents):
            return False
        return self.assigned_name == other.assigned_name

    def __hash__(self) -> int:
        return hash(self.assigned_name)

    def __reduce__(self):
        # Rebuild through the parser; instances reject attribute assignment
        return (URNComponents.from_string, (self.to_string(),))
