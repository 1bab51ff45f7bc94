"""Exceptions raised for caller programming errors."""


class PaginationError(Exception):
    """Base class for pagination errors."""


class InvalidPageRequestError(PaginationError, ValueError):
    """Raised when a page request descriptor is out of range."""
