"""URN Components - RFC 8141 Uniform Resource Names

This package parses, validates and normalizes URNs into their scheme,
namespace identifier, namespace specific string and r/q/f trailer, and
compares them by URN-equivalence.
"""

from .errors import (
    ParsingError,
    InsufficientNumberOfURNComponentsError,
    UnsupportedURNSchemeError,
    MissingNamespaceIdentifierError,
    InvalidNamespaceIdentifierMinimumLengthError,
    InvalidNamespaceIdentifierMaximumLengthError,
    InvalidCharactersInNamespaceIdentifierError,
    MissingNamespaceSpecificStringError,
    InvalidCharactersInNamespaceSpecificStringError,
)
from .encoding import uppercase_triplets
from .parts import Scheme, NID, NSS
from .rqf import RQF, ParameterItem
from .urn_components import URNComponents
from .json_codec import URNComponentsEncoder, urn_object_hook

__version__ = "0.1.0"

__all__ = [
    "URNComponents",
    "Scheme",
    "NID",
    "NSS",
    "RQF",
    "ParameterItem",
    "uppercase_triplets",
    "URNComponentsEncoder",
    "urn_object_hook",
    "ParsingError",
    "InsufficientNumberOfURNComponentsError",
    "UnsupportedURNSchemeError",
    "MissingNamespaceIdentifierError",
    "InvalidNamespaceIdentifierMinimumLengthError",
    "InvalidNamespaceIdentifierMaximumLengthError",
    "InvalidCharactersInNamespaceIdentifierError",
    "MissingNamespaceSpecificStringError",
    "InvalidCharactersInNamespaceSpecificStringError",
]
