"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    CommentId,
    Identifier,
    PostId,
    TagId,
    UserId,
)
from blog.domain.value.types import (
    CommentContent,
    CreationTimestamp,
    EmailAddress,
    PostContent,
    PostStatus,
    PostTitle,
    TagColor,
    TagName,
    TagSlug,
    UserRole,
    slugify,
)

__all__ = [
    # Identifiers
    "Identifier",
    "UserId",
    "PostId",
    "CommentId",
    "TagId",
    # Types
    "EmailAddress",
    "PostTitle",
    "PostContent",
    "PostStatus",
    "CommentContent",
    "TagName",
    "TagSlug",
    "TagColor",
    "UserRole",
    "CreationTimestamp",
    "slugify",
]
