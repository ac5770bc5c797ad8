"""Unit tests for GetTranslationsUseCase."""

from dishka import AsyncContainer
from pydantic import ValidationError as PydanticValidationError
import pytest

from blog.application.usecase.translation import (
    GetTranslationsRequest,
    GetTranslationsUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetTranslationsUseCase:
    """Tests for GetTranslationsUseCase against the bundled catalogues."""

    @pytest.mark.asyncio
    async def test_english_messages_are_flattened(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetTranslationsUseCase)

        result = await use_case.execute(GetTranslationsRequest(locale="en"))

        assert result.locale == "en"
        assert result.domain == "messages"
        assert result.translations["app.name"] == "Blog"
        assert result.translations["post.status.draft"] == "Draft"

    @pytest.mark.asyncio
    async def test_locales_share_keys(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetTranslationsUseCase)

        en = await use_case.execute(GetTranslationsRequest(locale="en"))
        tr = await use_case.execute(GetTranslationsRequest(locale="tr"))

        assert set(en.translations) == set(tr.translations)

    @pytest.mark.asyncio
    async def test_unknown_locale_is_empty(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetTranslationsUseCase)

        result = await use_case.execute(GetTranslationsRequest(locale="xx"))

        assert result.translations == {}

    @pytest.mark.parametrize("locale", ["EN", "eng", "e", "../"])
    def test_invalid_locale_rejected(self, locale):
        with pytest.raises(PydanticValidationError):
            GetTranslationsRequest(locale=locale)

    def test_invalid_domain_rejected(self):
        with pytest.raises(PydanticValidationError):
            GetTranslationsRequest(locale="en", domain="../secrets")
