"""Mappers for converting between database rows and domain models.

Since we're using immutable Pydantic domain models, we map manually
instead of using SQLAlchemy's ORM. Rows are rebuilt through each
entity's ``reconstitute`` factory so stored values are validated again.
"""

from typing import Any, Dict

from blog.domain.model import Comment, Post, Tag, User
from blog.domain.value import (
    CommentContent,
    CommentId,
    CreationTimestamp,
    EmailAddress,
    Identifier,
    PostContent,
    PostId,
    PostStatus,
    PostTitle,
    TagColor,
    TagId,
    TagName,
    TagSlug,
    UserId,
    UserRole,
)


def _identifier(value: Any) -> Identifier:
    return Identifier.from_string(str(value))


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User.reconstitute(
        id=UserId(_identifier(row["id"])),
        email=EmailAddress.from_string(row["email"]),
        password_hash=row["password_hash"],
        role=UserRole.from_string(row["role"]),
        created_at=CreationTimestamp.from_datetime(row["created_at"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": str(user.id),
        "email": user.email.value,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "created_at": user.created_at.value,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post.reconstitute(
        id=PostId(_identifier(row["id"])),
        title=PostTitle.from_string(row["title"]),
        content=PostContent.from_string(row["content"]),
        status=PostStatus.from_string(row["status"]),
        author_id=UserId(_identifier(row["author_id"])),
        created_at=CreationTimestamp.from_datetime(row["created_at"]),
        published_at=row.get("published_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": str(post.id),
        "title": post.title.value,
        "content": post.content.value,
        "status": post.status.value,
        "author_id": str(post.author_id),
        "created_at": post.created_at.value,
        "published_at": post.published_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment.reconstitute(
        id=CommentId(_identifier(row["id"])),
        content=CommentContent.from_string(row["content"]),
        post_id=PostId(_identifier(row["post_id"])),
        author_id=UserId(_identifier(row["author_id"])),
        created_at=CreationTimestamp.from_datetime(row["created_at"]),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": str(comment.id),
        "content": comment.content.value,
        "post_id": str(comment.post_id),
        "author_id": str(comment.author_id),
        "created_at": comment.created_at.value,
    }


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag.reconstitute(
        id=TagId(_identifier(row["id"])),
        name=TagName.from_string(row["name"]),
        slug=TagSlug.from_string(row["slug"]),
        color=TagColor.from_string(row["color"]),
        created_at=CreationTimestamp.from_datetime(row["created_at"]),
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {
        "id": str(tag.id),
        "name": tag.name.value,
        "slug": tag.slug.value,
        "color": tag.color.value,
        "created_at": tag.created_at.value,
    }
