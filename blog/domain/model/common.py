"""Base model for all domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

_FACTORY_KEY = "__entity_factory__"
_FACTORY_TOKEN = object()


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    Entities are sealed: instances come only from a subclass's ``create``
    or ``reconstitute`` classmethods, which go through ``_construct``.
    Calling the class directly raises TypeError.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    @model_validator(mode="before")
    @classmethod
    def require_factory(cls, data: Any, info: ValidationInfo) -> Any:
        """Reject construction that bypasses the entity factories."""
        context = info.context or {}
        if context.get(_FACTORY_KEY) is not _FACTORY_TOKEN:
            raise TypeError(
                f"{cls.__name__} must be created via {cls.__name__}.create() "
                f"or {cls.__name__}.reconstitute()"
            )
        return data

    @classmethod
    def _construct(cls, **fields: Any):
        return cls.model_validate(fields, context={_FACTORY_KEY: _FACTORY_TOKEN})
