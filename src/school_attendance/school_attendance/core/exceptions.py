class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""


class StoreUnavailableError(DomainError):
    """Raised when the backing store cannot be reached.

    Recoverable: callers keep the last good data and retry later.
    """
