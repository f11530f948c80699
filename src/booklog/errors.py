# ABOUTME: Exception types shared by the catalog, cover lookup, and CLI layers.
# ABOUTME: Each kind lets callers give a specific message instead of a generic failure.


class BooklogError(Exception):
    """Base class for all Booklog errors."""


class ValidationError(BooklogError):
    """Raised when book fields are missing or malformed (e.g. blank title)."""


class NotFoundError(BooklogError):
    """Raised when an update targets a book id that does not exist."""


class ConstraintError(BooklogError):
    """Raised when the store rejects a write, e.g. a duplicate ISBN."""


class ExternalServiceError(BooklogError):
    """Raised when a request to an external metadata service fails."""
