"""Base class for value objects."""

from typing import Any, Generic, TypeVar

from pydantic import ConfigDict, RootModel
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import ValidationError


T = TypeVar("T")
V = TypeVar("V", bound="RootValueObject")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root or .value)
    - model_dump() automatically returns the primitive value, not a dict
    - Field validators raise the domain ValidationError, which pydantic
      lets through untouched

    Subclasses expose named factories built on top of ``_build``.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    @classmethod
    def _build(cls: type[V], raw: Any) -> V:
        """Construct the value object, reporting type mismatches as domain errors.

        Args:
            raw: Primitive input

        Returns:
            Validated value object

        Raises:
            ValidationError: If the input is rejected
        """
        try:
            return cls(raw)
        except PydanticValidationError as e:
            errors = e.errors()
            detail = errors[0]["msg"] if errors else str(e)
            raise ValidationError(f"Invalid {cls.__name__}: {detail}") from e

    @property
    def value(self) -> T:
        """Canonical primitive projection."""
        return self.root

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
