"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.adapter.translation import YamlTranslationLoader
from blog.config import AuthSettings, TranslationSettings
from blog.domain.service import TokenService, TranslationLoader
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Both services are stateless apart from settings, so they live for the
    whole application.
    """

    scope = Scope.APP

    @provide
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide access token domain service."""
        return TokenService(auth_settings=auth_settings)

    @provide
    def get_translation_loader(
        self, translation_settings: TranslationSettings
    ) -> TranslationLoader:
        """Provide YAML-backed translation catalogue loader."""
        return YamlTranslationLoader(directory=translation_settings.directory)
