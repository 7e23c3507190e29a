"""Character classes and grammar constants from RFC 8141"""

import string
from typing import FrozenSet, Tuple

DEFAULT_SCHEME = "urn"

SEPARATOR = ":"

# NID = 2*30( ALPHA / DIGIT / "-" ); RFC 8141 allows 31, this library stops at 30
NID_MIN_LENGTH = 2
NID_MAX_LENGTH = 30

RESOLUTION_INDICATOR = "?+"
QUERY_INDICATOR = "?="
FRAGMENT_INDICATOR = "#"

# Canonical order of the r-, q- and f-components
RQF_INDICATORS: Tuple[str, str, str] = (
    RESOLUTION_INDICATOR,
    QUERY_INDICATOR,
    FRAGMENT_INDICATOR,
)

ALPHANUMERICS: FrozenSet[str] = frozenset(string.ascii_letters + string.digits)

NAMESPACE_IDENTIFIER: FrozenSet[str] = ALPHANUMERICS | {"-"}

# pchar from RFC 3986 (minus pct-encoded) plus "/"
NAMESPACE_SPECIFIC_STRING: FrozenSet[str] = ALPHANUMERICS | frozenset("-._~!$&'()*+,;=:@/")

PERCENT_ENCODED_NAMESPACE_SPECIFIC_STRING: FrozenSet[str] = NAMESPACE_SPECIFIC_STRING | {"%"}


def contains_only(value: str, allowed: FrozenSet[str]) -> bool:
    """Check that every character of value is in allowed"""
    return all(c in allowed for c in value)
