class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is structurally invalid."""


class NotFoundError(DomainError):
    """Raised when a requested student or subject does not exist."""
