class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidTransitionError(DomainError):
    """Raised by the service layer when a session transition is rejected."""


class ConfigurationError(DomainError):
    """Raised at startup when role or super-admin configuration is malformed."""
