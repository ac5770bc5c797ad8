"""Unit tests for comment use cases."""

from dishka import AsyncContainer
import pytest

from blog.application.error import NotFoundError
from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import ValidationError
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import Identifier
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

MISSING_ID = "550e8400-e29b-41d4-a716-446655440000"


async def _saved_post_id(env: AsyncContainer) -> str:
    post_repo = await env.get(PostRepository)
    post = await post_repo.save(make_post())
    return post.id.value


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_on_existing_post(self, unit_env: AsyncContainer):
        """Comment should be stored against the post."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = await _saved_post_id(unit_env)
        author_id = Identifier.generate().value

        # Act
        result = await create.execute(
            CreateCommentRequest(content="  Great read  ", post_id=post_id, author_id=author_id)
        )

        # Assert
        saved = await comment_repo.find_by_id(Identifier.from_string(result.comment_id))
        assert saved is not None
        assert saved.content.value == "Great read"
        assert saved.post_id.value == post_id
        assert saved.author_id.value == author_id

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await create.execute(
                CreateCommentRequest(
                    content="Hello there",
                    post_id=MISSING_ID,
                    author_id=Identifier.generate().value,
                )
            )

    @pytest.mark.asyncio
    async def test_create_comment_too_short(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateCommentUseCase)
        post_id = await _saved_post_id(unit_env)

        with pytest.raises(ValidationError):
            await create.execute(
                CreateCommentRequest(
                    content="hi", post_id=post_id, author_id=Identifier.generate().value
                )
            )


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        post_id = await _saved_post_id(unit_env)
        created = await create.execute(
            CreateCommentRequest(
                content="First take", post_id=post_id, author_id=Identifier.generate().value
            )
        )

        view = await update.execute(
            UpdateCommentRequest(comment_id=created.comment_id, content="Second take")
        )

        assert view.id == created.comment_id
        assert view.content == "Second take"

    @pytest.mark.asyncio
    async def test_update_missing_comment(self, unit_env: AsyncContainer):
        update = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateCommentRequest(comment_id=MISSING_ID, content="Second take")
            )


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_get_existing_comment(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateCommentUseCase)
        get = await unit_env.get(GetCommentUseCase)
        post_id = await _saved_post_id(unit_env)
        author_id = Identifier.generate().value
        created = await create.execute(
            CreateCommentRequest(content="Look me up", post_id=post_id, author_id=author_id)
        )

        view = await get.execute(GetCommentRequest(comment_id=created.comment_id))

        assert view is not None
        assert view.author_id == author_id

    @pytest.mark.asyncio
    async def test_get_missing_comment_returns_none(self, unit_env: AsyncContainer):
        get = await unit_env.get(GetCommentUseCase)

        assert await get.execute(GetCommentRequest(comment_id=MISSING_ID)) is None


class TestListAndDeleteComments:
    """Tests for ListCommentsUseCase and DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_list_returns_oldest_first(self, unit_env: AsyncContainer):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        post_id = await _saved_post_id(unit_env)
        for text in ("one comment", "two comment", "three comment"):
            await create.execute(
                CreateCommentRequest(
                    content=text, post_id=post_id, author_id=Identifier.generate().value
                )
            )

        # Act
        result = await list_comments.execute(ListCommentsRequest(post_id=post_id))

        # Assert
        assert [c.content for c in result.comments] == [
            "one comment",
            "two comment",
            "three comment",
        ]

    @pytest.mark.asyncio
    async def test_list_for_unknown_post_is_empty(self, unit_env: AsyncContainer):
        list_comments = await unit_env.get(ListCommentsUseCase)

        result = await list_comments.execute(ListCommentsRequest(post_id=MISSING_ID))

        assert result.comments == []

    @pytest.mark.asyncio
    async def test_delete_comment(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = await _saved_post_id(unit_env)
        created = await create.execute(
            CreateCommentRequest(
                content="Soon gone", post_id=post_id, author_id=Identifier.generate().value
            )
        )

        await delete.execute(DeleteCommentRequest(comment_id=created.comment_id))

        assert await comment_repo.find_by_id(Identifier.from_string(created.comment_id)) is None
        with pytest.raises(NotFoundError):
            await delete.execute(DeleteCommentRequest(comment_id=created.comment_id))
