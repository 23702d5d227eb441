class DomainError(Exception):
    """Base exception for business rule violations.

    Each subclass carries the HTTP status the API layer answers with.
    """

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidSubscriptionType(ValidationError):
    """Raised when a subscription cadence is none of annual/semi-annual/quarterly."""


class ConflictError(DomainError):
    """Raised when a unique value (username, email) is already taken."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class UnauthorizedError(AuthenticationError):
    """Raised when the session is missing or expired."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class InternalError(DomainError):
    """Raised for storage or unexpected failures. Message stays generic."""

    status_code = 500
