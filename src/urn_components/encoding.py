"""Percent-encoding normalization for namespace specific strings

RFC 8141 section 3.1 normalizes percent-encoded characters in the NSS by
converting the hex digits of every <pct-encoded> triplet to upper case.
Triplets are never decoded: `%2C` and `,` are different characters for
URN-equivalence.
"""

import re
from typing import List, Tuple

_TRIPLET = re.compile(r"%[0-9A-Fa-f]{2}")


def uppercase_triplets(value: str) -> Tuple[str, List[Tuple[int, int]]]:
    """Uppercase the hex digits of every percent-encoded triplet

    Returns the normalized string and the (start, end) spans of the triplets,
    in source order. A `%` that is not followed by two hex digits is left as is.
    """
    spans = [m.span() for m in _TRIPLET.finditer(value)]
    normalized = _TRIPLET.sub(lambda m: m.group(0).upper(), value)
    return normalized, spans
