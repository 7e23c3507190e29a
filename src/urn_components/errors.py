"""Errors raised while parsing and validating URNs"""


class ParsingError(Exception):
    """Base exception for URN parsing errors"""
    pass


class InsufficientNumberOfURNComponentsError(ParsingError):
    """URN has fewer than two ':' separators"""
    pass


class UnsupportedURNSchemeError(ParsingError):
    """Scheme is not 'urn'"""
    pass


class MissingNamespaceIdentifierError(ParsingError):
    """Empty namespace identifier (NID)"""
    pass


class InvalidNamespaceIdentifierMinimumLengthError(ParsingError):
    """NID is shorter than the minimum length"""
    pass


class InvalidNamespaceIdentifierMaximumLengthError(ParsingError):
    """NID is longer than the maximum length"""
    pass


class InvalidCharactersInNamespaceIdentifierError(ParsingError):
    """Disallowed character in the NID"""
    pass


class MissingNamespaceSpecificStringError(ParsingError):
    """Empty namespace specific string (NSS)"""
    pass


class InvalidCharactersInNamespaceSpecificStringError(ParsingError):
    """Disallowed character in the NSS"""
    pass
