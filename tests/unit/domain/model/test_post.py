"""Unit tests for the Post aggregate."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import BusinessRuleViolationError
from blog.domain.model import Post
from blog.domain.value import (
    CreationTimestamp,
    Identifier,
    PostContent,
    PostId,
    PostStatus,
    PostTitle,
    UserId,
)
from tests.conftest import make_post


class TestPostCreation:
    """Tests for creating and rebuilding posts."""

    def test_create_starts_as_draft(self):
        author_id = UserId(Identifier.generate())

        post = make_post(author_id=author_id)

        assert post.is_draft()
        assert post.status is PostStatus.DRAFT
        assert post.published_at is None
        assert post.author_id == author_id
        assert post.title.value == "My First Post"

    def test_create_assigns_fresh_ids(self):
        assert make_post().id != make_post().id

    def test_direct_construction_is_rejected(self):
        """Posts only come from create() or reconstitute()."""
        with pytest.raises(TypeError):
            Post(
                id=PostId(Identifier.generate()),
                title=PostTitle.from_string("Direct"),
                content=PostContent.from_string("Bypassing the factory"),
                status=PostStatus.DRAFT,
                author_id=UserId(Identifier.generate()),
                created_at=CreationTimestamp.now(),
            )

    def test_reconstitute_rejects_published_without_date(self):
        with pytest.raises(PydanticValidationError):
            Post.reconstitute(
                id=PostId(Identifier.generate()),
                title=PostTitle.from_string("Loaded"),
                content=PostContent.from_string("Loaded from storage"),
                status=PostStatus.PUBLISHED,
                author_id=UserId(Identifier.generate()),
                created_at=CreationTimestamp.now(),
                published_at=None,
            )

    def test_reconstitute_rejects_draft_with_date(self):
        with pytest.raises(PydanticValidationError):
            Post.reconstitute(
                id=PostId(Identifier.generate()),
                title=PostTitle.from_string("Loaded"),
                content=PostContent.from_string("Loaded from storage"),
                status=PostStatus.DRAFT,
                author_id=UserId(Identifier.generate()),
                created_at=CreationTimestamp.now(),
                published_at=datetime.now(timezone.utc),
            )

    def test_reconstitute_keeps_archived_publication_date(self):
        published_at = datetime(2024, 5, 1, tzinfo=timezone.utc)

        post = Post.reconstitute(
            id=PostId(Identifier.generate()),
            title=PostTitle.from_string("Old news"),
            content=PostContent.from_string("Archived after publishing"),
            status=PostStatus.ARCHIVED,
            author_id=UserId(Identifier.generate()),
            created_at=CreationTimestamp.now(),
            published_at=published_at,
        )

        assert post.is_archived()
        assert post.published_at == published_at

    def test_reconstitute_pins_publication_date_to_utc(self):
        """Offset-aware times are converted; naive ones are taken as UTC."""
        aware = datetime.fromisoformat("2024-05-01T14:00:00+02:00")
        naive = datetime(2024, 5, 1, 12, 0, 0)

        posts = [
            Post.reconstitute(
                id=PostId(Identifier.generate()),
                title=PostTitle.from_string("Old news"),
                content=PostContent.from_string("Published a while ago"),
                status=PostStatus.PUBLISHED,
                author_id=UserId(Identifier.generate()),
                created_at=CreationTimestamp.now(),
                published_at=value,
            )
            for value in (aware, naive)
        ]

        for post in posts:
            assert post.published_at.tzinfo is timezone.utc
            assert post.published_at == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)


class TestPostLifecycle:
    """Tests for the draft -> published -> archived state machine."""

    def test_publish_stamps_publication_time(self, post):
        before = datetime.now(timezone.utc)

        published = post.publish()

        assert published.is_published()
        assert published.published_at is not None
        assert published.published_at >= before
        assert published.id == post.id

    def test_publish_leaves_original_untouched(self, post):
        post.publish()

        assert post.is_draft()
        assert post.published_at is None

    def test_publish_twice_fails(self, post):
        published = post.publish()

        with pytest.raises(BusinessRuleViolationError, match="already published"):
            published.publish()

    def test_publish_archived_fails(self, post):
        archived = post.archive()

        with pytest.raises(BusinessRuleViolationError, match="archived post"):
            archived.publish()

    def test_archive_after_publish(self, post):
        archived = post.publish().archive()

        assert archived.is_archived()
        assert archived.published_at is not None

    def test_archive_draft_directly(self, post):
        archived = post.archive()

        assert archived.is_archived()
        assert archived.published_at is None

    def test_archive_twice_fails(self, post):
        with pytest.raises(BusinessRuleViolationError, match="already archived"):
            post.archive().archive()


class TestPostUpdateContent:
    """Tests for editing posts."""

    def test_update_draft(self, post):
        updated = post.update_content(
            title=PostTitle.from_string("New title"),
            content=PostContent.from_string("Brand new content"),
        )

        assert updated.title.value == "New title"
        assert updated.content.value == "Brand new content"
        assert updated.is_draft()

    def test_update_published_fails(self, post):
        published = post.publish()

        with pytest.raises(BusinessRuleViolationError, match="Cannot update published post"):
            published.update_content(
                title=PostTitle.from_string("New title"),
                content=PostContent.from_string("Brand new content"),
            )

    def test_update_archived_is_allowed(self, post):
        archived = post.archive()

        updated = archived.update_content(
            title=PostTitle.from_string("Revived"),
            content=PostContent.from_string("Edited while archived"),
        )

        assert updated.is_archived()
        assert updated.title.value == "Revived"
