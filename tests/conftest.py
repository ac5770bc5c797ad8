"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

from blog.domain.model import Comment, Post, Tag, User
from blog.domain.value import (
    CommentContent,
    CreationTimestamp,
    EmailAddress,
    Identifier,
    PostContent,
    PostId,
    PostStatus,
    PostTitle,
    TagColor,
    TagName,
    TagSlug,
    UserId,
    UserRole,
)

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    email: str = "alice@example.com",
    password_hash: str = "hashed:secret",
    role: UserRole | None = None,
) -> User:
    """Build a fresh user with sensible defaults."""
    return User.create(
        email=EmailAddress.from_string(email), password_hash=password_hash, role=role
    )


def make_post(
    title: str = "My First Post",
    content: str = "Twenty characters!!!",
    author_id: UserId | None = None,
) -> Post:
    """Build a fresh draft post with sensible defaults."""
    return Post.create(
        title=PostTitle.from_string(title),
        content=PostContent.from_string(content),
        author_id=author_id or UserId(Identifier.generate()),
    )


def make_published_post(
    title: str,
    published_at: datetime,
    author_id: UserId | None = None,
) -> Post:
    """Rebuild a published post with a chosen publication time."""
    return Post.reconstitute(
        id=PostId(Identifier.generate()),
        title=PostTitle.from_string(title),
        content=PostContent.from_string("Published body text"),
        status=PostStatus.PUBLISHED,
        author_id=author_id or UserId(Identifier.generate()),
        created_at=CreationTimestamp.from_datetime(
            datetime(2024, 1, 1, tzinfo=timezone.utc)
        ),
        published_at=published_at,
    )


def make_comment(post: Post, content: str = "Nice post", author_id=None) -> Comment:
    """Build a fresh comment on a post."""
    return Comment.create(
        content=CommentContent.from_string(content),
        post_id=post.id,
        author_id=author_id or UserId(Identifier.generate()),
    )


def make_tag(name: str = "Python", color: str = "#3B82F6") -> Tag:
    """Build a fresh tag whose slug is derived from its name."""
    tag_name = TagName.from_string(name)
    return Tag.create(
        name=tag_name,
        slug=TagSlug.from_name(tag_name),
        color=TagColor.from_string(color),
    )


@pytest.fixture
def user() -> User:
    return make_user()


@pytest.fixture
def post() -> Post:
    return make_post()
