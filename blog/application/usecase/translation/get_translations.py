"""Get translations use case."""

import re

import logfire
from pydantic import BaseModel, field_validator

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import TranslationLoader

AVAILABLE_LOCALES: list[dict[str, str]] = [
    {"code": "en", "name": "English", "native": "English"},
    {"code": "tr", "name": "Turkish", "native": "Türkçe"},
]

AVAILABLE_DOMAINS: list[dict[str, str]] = [
    {"name": "messages", "description": "General application messages"},
    {"name": "validators", "description": "Form validation messages"},
]


class GetTranslationsRequest(BaseModel):
    """Get translations request."""

    locale: str
    domain: str = "messages"

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Require a two-letter lowercase ISO code."""
        if not re.fullmatch(r"[a-z]{2}", v):
            raise ValueError(
                "Invalid locale format. Use 2-character ISO codes (e.g., en, tr)"
            )
        return v

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Keep catalogue names to a safe file-name alphabet."""
        if not re.fullmatch(r"[a-z_]+", v):
            raise ValueError("Invalid translation domain")
        return v


class GetTranslationsResponse(BaseModel):
    """Flattened translation catalogue."""

    locale: str
    domain: str
    translations: dict[str, str]


class GetTranslationsUseCase(BaseUseCase):
    """Use case for fetching a translation catalogue."""

    def __init__(self, translation_loader: TranslationLoader) -> None:
        """Initialize get translations use case.

        Args:
            translation_loader: Source of translation catalogues
        """
        self.translation_loader = translation_loader

    async def execute(self, request: GetTranslationsRequest) -> GetTranslationsResponse:
        """Execute get translations flow.

        Missing catalogues yield an empty mapping rather than an error.

        Args:
            request: Locale and domain to fetch

        Returns:
            Flattened translations
        """
        translations = self.translation_loader.load(request.locale, request.domain)
        logfire.debug(
            "Translations loaded",
            locale=request.locale,
            domain=request.domain,
            count=len(translations),
        )
        return GetTranslationsResponse(
            locale=request.locale,
            domain=request.domain,
            translations=translations,
        )
