"""Validated URN parts: scheme, namespace identifier and namespace specific string

Each part is a small immutable value. Constructing one, directly or through
`from_string`, validates and normalizes its input.
"""

from dataclasses import dataclass
from typing import List

from .charsets import (
    DEFAULT_SCHEME,
    NAMESPACE_IDENTIFIER,
    NAMESPACE_SPECIFIC_STRING,
    NID_MAX_LENGTH,
    NID_MIN_LENGTH,
    PERCENT_ENCODED_NAMESPACE_SPECIFIC_STRING,
    SEPARATOR,
    contains_only,
)
from .encoding import uppercase_triplets
from .errors import (
    InvalidCharactersInNamespaceIdentifierError,
    InvalidCharactersInNamespaceSpecificStringError,
    InvalidNamespaceIdentifierMaximumLengthError,
    InvalidNamespaceIdentifierMinimumLengthError,
    MissingNamespaceIdentifierError,
    MissingNamespaceSpecificStringError,
    UnsupportedURNSchemeError,
)


@dataclass(frozen=True, repr=False)
class _Part:
    """Immutable wrapper around a normalized string

    Every construction path, `from_string` or the constructor itself, runs
    `normalize`, so an instance always satisfies its part's grammar.
    """
    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", self.normalize(self.value))

    @staticmethod
    def normalize(s: str) -> str:
        raise NotImplementedError

    @classmethod
    def from_string(cls, s: str) -> '_Part':
        return cls(s)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.value}')"


class Scheme(_Part):
    """URN scheme, always stored as lowercase 'urn'"""

    @staticmethod
    def normalize(s: str) -> str:
        if s.lower() != DEFAULT_SCHEME:
            raise UnsupportedURNSchemeError(f"Unsupported URN scheme: '{s}'")
        return s.lower()


class NID(_Part):
    """Namespace identifier (NID)

    Case-insensitive; normalized to lowercase.
    """

    @staticmethod
    def normalize(s: str) -> str:
        """Validate a namespace identifier

        The checks run in a fixed order so that input violating several rules
        always reports the same error: emptiness, minimum length, maximum
        length, then characters.
        """
        if not s:
            raise MissingNamespaceIdentifierError("Namespace identifier cannot be empty")

        if len(s) < NID_MIN_LENGTH:
            raise InvalidNamespaceIdentifierMinimumLengthError(
                f"Namespace identifier '{s}' is shorter than {NID_MIN_LENGTH} characters")

        if len(s) > NID_MAX_LENGTH:
            raise InvalidNamespaceIdentifierMaximumLengthError(
                f"Namespace identifier '{s}' is longer than {NID_MAX_LENGTH} characters")

        if not contains_only(s, NAMESPACE_IDENTIFIER):
            raise InvalidCharactersInNamespaceIdentifierError(
                f"Invalid characters in namespace identifier: '{s}'")

        return s.lower()


class NSS(_Part):
    """Namespace specific string (NSS)

    Case-sensitive, except for the hex digits of percent-encoded triplets
    which are normalized to uppercase.
    """

    @staticmethod
    def normalize(s: str) -> str:
        if not s:
            raise MissingNamespaceSpecificStringError("Namespace specific string cannot be empty")

        normalized, triplets = uppercase_triplets(s)

        # A bare '%' is only acceptable once the string is known to be percent-encoded
        if triplets:
            allowed = PERCENT_ENCODED_NAMESPACE_SPECIFIC_STRING
        else:
            allowed = NAMESPACE_SPECIFIC_STRING

        if not contains_only(normalized, allowed):
            raise InvalidCharactersInNamespaceSpecificStringError(
                f"Invalid characters in namespace specific string: '{s}'")

        return normalized

    @property
    def elements(self) -> List[str]:
        """Elements of the NSS separated by ':', empty elements omitted"""
        return [e for e in self.value.split(SEPARATOR) if e]
