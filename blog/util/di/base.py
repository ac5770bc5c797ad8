"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for in-memory/fake implementations
Component = Literal["persistence", "security"]


class ProviderBase(Provider):
    """Common base for every provider in the container.

    Mockable components declare a base class with ``__mock_component__``
    set, plus one production and one mock subclass told apart by
    ``__is_mock__``. Concrete providers leave both at their defaults.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
