"""Translation use cases."""

from .get_translations import (
    AVAILABLE_DOMAINS,
    AVAILABLE_LOCALES,
    GetTranslationsRequest,
    GetTranslationsResponse,
    GetTranslationsUseCase,
)

__all__ = [
    "AVAILABLE_DOMAINS",
    "AVAILABLE_LOCALES",
    "GetTranslationsRequest",
    "GetTranslationsResponse",
    "GetTranslationsUseCase",
]
