"""Custom exception types for bibparse operations."""


class BibparseError(Exception):
    """Base exception for all bibparse operations."""


class FileOperationError(BibparseError):
    """Raised when a bibliography document cannot be read."""


class ParseError(BibparseError):
    """Raised when a document cannot be interpreted by the grammar."""


class IncompleteInputError(ParseError):
    """Raised when input ends inside a construct that has already been committed to."""


class NestingDepthError(ParseError):
    """Raised when delimiter nesting exceeds the configured maximum depth."""


class InvalidDataError(BibparseError):
    """Raised when serialized data does not match the item model."""
