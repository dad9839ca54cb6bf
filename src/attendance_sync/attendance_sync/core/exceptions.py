class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when the admin password is wrong."""


class StoreError(Exception):
    """Base exception for persistence backends."""


class StoreUnavailableError(StoreError):
    """Raised when the durable store is not configured or cannot be reached."""


class StoreTimeoutError(StoreError):
    """Raised when a durable store call does not settle within its window."""


class StoreReadError(StoreError):
    """Raised when the local file exists but cannot be read or parsed."""


class ReliabilityError(StoreError):
    """Raised when state cannot be loaded from any source.

    Returning an empty default here would let the next save overwrite real data.
    """
