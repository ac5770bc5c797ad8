"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class NotAuthorizedError(InterfaceError):
    """Authenticated caller lacks the role the operation requires."""

    pass
