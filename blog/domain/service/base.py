"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold behaviour that needs collaborators (settings, external
    libraries) and so does not fit on an entity or value object.
    """

    pass
