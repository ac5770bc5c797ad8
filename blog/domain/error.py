"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when a value object is constructed from invalid input."""

    pass


class BusinessRuleViolationError(DomainError):
    """Raised when an entity refuses a state transition."""

    pass
