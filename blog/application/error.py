"""Application layer errors."""


class ApplicationError(Exception):
    """Base application error."""

    pass


class NotFoundError(ApplicationError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(ApplicationError):
    """Raised when a uniqueness rule would be broken."""

    pass


class AuthenticationError(ApplicationError):
    """Raised when credentials or tokens are rejected."""

    pass
