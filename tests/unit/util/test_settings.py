"""Tests for settings loading and the config provider."""

from dishka import make_async_container
import pytest

from blog.config import Settings
from blog.util.di.core import ProdConfigProvider
from blog.util.error import ConfigurationError


class TestSettings:
    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("AUTH__JWT_SECRET", "from-env")
        monkeypatch.setenv("API__PORT", "9000")

        settings = Settings()

        assert settings.auth.jwt_secret == "from-env"
        assert settings.api.base_url.endswith(":9000")

    def test_translation_defaults(self):
        settings = Settings()

        assert settings.translations.default_locale == "en"
        assert (settings.translations.directory / "messages.en.yaml").is_file()


class TestProdConfigProvider:
    @pytest.mark.asyncio
    async def test_production_requires_jwt_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("AUTH__JWT_SECRET", raising=False)
        container = make_async_container(ProdConfigProvider())

        with pytest.raises(ConfigurationError):
            await container.get(Settings)

        await container.close()

    @pytest.mark.asyncio
    async def test_production_with_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("AUTH__JWT_SECRET", "a-real-secret")
        container = make_async_container(ProdConfigProvider())

        settings = await container.get(Settings)

        assert settings.environment == "production"
        await container.close()
