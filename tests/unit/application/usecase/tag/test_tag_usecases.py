"""Unit tests for tag use cases."""

from dishka import AsyncContainer
import pytest

from blog.application.error import ConflictError, NotFoundError
from blog.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    GetTagBySlugRequest,
    GetTagBySlugUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from blog.domain.error import ValidationError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTagUseCase:
    """Tests for CreateTagUseCase."""

    @pytest.mark.asyncio
    async def test_slug_and_color_defaults(self, unit_env: AsyncContainer):
        """Slug derives from the name and color defaults to blue."""
        create = await unit_env.get(CreateTagUseCase)
        get = await unit_env.get(GetTagBySlugUseCase)

        result = await create.execute(CreateTagRequest(name="Hello World"))

        assert result.slug == "hello-world"
        tag = await get.execute(GetTagBySlugRequest(slug="hello-world"))
        assert tag is not None
        assert tag.tag_id == result.tag_id
        assert tag.color == "#3B82F6"

    @pytest.mark.asyncio
    async def test_explicit_slug_and_color(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateTagUseCase)
        get = await unit_env.get(GetTagBySlugUseCase)

        await create.execute(CreateTagRequest(name="Python", slug="py", color="f00"))

        tag = await get.execute(GetTagBySlugRequest(slug="py"))
        assert tag.name == "Python"
        assert tag.color == "#FF0000"

    @pytest.mark.asyncio
    async def test_duplicate_slug_conflicts(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateTagUseCase)
        await create.execute(CreateTagRequest(name="Python"))

        with pytest.raises(ConflictError):
            await create.execute(CreateTagRequest(name="python"))

    @pytest.mark.asyncio
    async def test_invalid_name(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateTagUseCase)

        with pytest.raises(ValidationError):
            await create.execute(CreateTagRequest(name="Hello World!"))


class TestUpdateTagUseCase:
    """Tests for UpdateTagUseCase."""

    @pytest.mark.asyncio
    async def test_update_replaces_properties(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateTagUseCase)
        update = await unit_env.get(UpdateTagUseCase)
        created = await create.execute(CreateTagRequest(name="Python"))

        view = await update.execute(
            UpdateTagRequest(tag_id=created.tag_id, name="Rust Lang", color="#10B981")
        )

        assert view.name == "Rust Lang"
        assert view.slug == "rust-lang"
        assert view.color == "#10B981"

    @pytest.mark.asyncio
    async def test_update_keeping_own_slug(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateTagUseCase)
        update = await unit_env.get(UpdateTagUseCase)
        created = await create.execute(CreateTagRequest(name="Python"))

        view = await update.execute(
            UpdateTagRequest(
                tag_id=created.tag_id, name="Python", slug="python", color="#EF4444"
            )
        )

        assert view.color == "#EF4444"

    @pytest.mark.asyncio
    async def test_update_to_taken_slug_conflicts(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateTagUseCase)
        update = await unit_env.get(UpdateTagUseCase)
        await create.execute(CreateTagRequest(name="Python"))
        rust = await create.execute(CreateTagRequest(name="Rust"))

        with pytest.raises(ConflictError):
            await update.execute(
                UpdateTagRequest(
                    tag_id=rust.tag_id, name="Rust", slug="python", color="#EF4444"
                )
            )

    @pytest.mark.asyncio
    async def test_update_missing_tag(self, unit_env: AsyncContainer):
        update = await unit_env.get(UpdateTagUseCase)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateTagRequest(
                    tag_id="550e8400-e29b-41d4-a716-446655440000",
                    name="Ghost",
                    color="#EF4444",
                )
            )


class TestListAndGetTags:
    """Tests for ListTagsUseCase and GetTagBySlugUseCase."""

    @pytest.mark.asyncio
    async def test_list_orders_by_name(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateTagUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)
        for name in ("Rust", "Go", "Python"):
            await create.execute(CreateTagRequest(name=name))

        result = await list_tags.execute(ListTagsRequest())

        assert [t.name for t in result.tags] == ["Go", "Python", "Rust"]

    @pytest.mark.asyncio
    async def test_get_unknown_slug_returns_none(self, unit_env: AsyncContainer):
        get = await unit_env.get(GetTagBySlugUseCase)

        assert await get.execute(GetTagBySlugRequest(slug="missing")) is None

    @pytest.mark.asyncio
    async def test_get_malformed_slug(self, unit_env: AsyncContainer):
        get = await unit_env.get(GetTagBySlugUseCase)

        with pytest.raises(ValidationError):
            await get.execute(GetTagBySlugRequest(slug="Not A Slug"))
