class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested attendance event or employee does not exist."""


class StorageError(DomainError):
    """Raised when the event store cannot complete an operation."""


class ReconciliationError(DomainError):
    """Raised when report totals do not match the sum of their days."""
