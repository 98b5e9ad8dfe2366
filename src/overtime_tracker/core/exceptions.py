class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a duration or date token cannot be parsed."""


class NotFoundError(DomainError):
    """Raised when an operation targets a date that has no entry."""


class StorageError(DomainError):
    """Raised when the data file cannot be read, written or decoded."""
