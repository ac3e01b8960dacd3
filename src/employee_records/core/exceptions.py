class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an employee id does not exist in the store."""


class AuthenticationError(DomainError):
    """Raised when login credentials or a bearer token are invalid."""


class PersistenceError(DomainError):
    """Raised when the data file cannot be read or written."""
