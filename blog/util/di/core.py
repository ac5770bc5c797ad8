"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import AuthSettings, Settings, TranslationSettings
from blog.util.di.base import ProviderBase
from blog.util.error import ConfigurationError

_DEFAULT_JWT_SECRET = AuthSettings().jwt_secret


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == _DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_translation_settings(self, settings: Settings) -> TranslationSettings:
        """Provide translation settings."""
        return settings.translations
