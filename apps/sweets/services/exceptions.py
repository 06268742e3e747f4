"""Domain-specific exceptions for sweets services."""


class SweetsServiceError(Exception):
    """Base exception for sweets services."""
    pass


class SweetNotFoundError(SweetsServiceError):
    """Raised when sweet does not exist."""
    pass
