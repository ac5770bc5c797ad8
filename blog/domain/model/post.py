"""Post aggregate root.

Posts move through a small lifecycle: draft -> published -> archived.
A draft can also be archived directly.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import field_validator, model_validator

from blog.domain.error import BusinessRuleViolationError
from blog.domain.model.common import DomainModel
from blog.domain.value import (
    CreationTimestamp,
    Identifier,
    PostContent,
    PostId,
    PostStatus,
    PostTitle,
    UserId,
)


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - A draft has no published_at
    - A published post always has published_at, stamped once on publish
    - Content cannot be edited while the post is published
    """

    id: PostId
    title: PostTitle
    content: PostContent
    status: PostStatus
    author_id: UserId
    created_at: CreationTimestamp
    published_at: Optional[datetime] = None

    @field_validator("published_at")
    @classmethod
    def pin_published_at_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store publication times as UTC; naive values are taken to be UTC."""
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @model_validator(mode="after")
    def validate_publication_state(self) -> "Post":
        """Validate that published_at agrees with the status."""
        if self.status.is_draft() and self.published_at is not None:
            raise ValueError("Draft posts cannot have a publication date")
        if self.status.is_published() and self.published_at is None:
            raise ValueError("Published posts must have a publication date")
        return self

    @classmethod
    def create(
        cls, title: PostTitle, content: PostContent, author_id: UserId
    ) -> "Post":
        """Create a new draft post with a fresh id and creation time."""
        return cls._construct(
            id=PostId(Identifier.generate()),
            title=title,
            content=content,
            status=PostStatus.DRAFT,
            author_id=author_id,
            created_at=CreationTimestamp.now(),
            published_at=None,
        )

    @classmethod
    def reconstitute(
        cls,
        id: PostId,
        title: PostTitle,
        content: PostContent,
        status: PostStatus,
        author_id: UserId,
        created_at: CreationTimestamp,
        published_at: Optional[datetime],
    ) -> "Post":
        """Rebuild a post loaded from storage."""
        return cls._construct(
            id=id,
            title=title,
            content=content,
            status=status,
            author_id=author_id,
            created_at=created_at,
            published_at=published_at,
        )

    def publish(self) -> "Post":
        """Publish a draft post.

        Returns:
            Published copy of the post, stamped with the current time

        Raises:
            BusinessRuleViolationError: If already published or archived
        """
        if self.status.is_published():
            raise BusinessRuleViolationError("Post is already published")
        if self.status.is_archived():
            raise BusinessRuleViolationError("Cannot publish an archived post")
        return self.model_copy(
            update={
                "status": PostStatus.PUBLISHED,
                "published_at": datetime.now(timezone.utc),
            }
        )

    def archive(self) -> "Post":
        """Archive the post.

        Drafts may be archived without being published first.

        Raises:
            BusinessRuleViolationError: If already archived
        """
        if self.status.is_archived():
            raise BusinessRuleViolationError("Post is already archived")
        return self.model_copy(update={"status": PostStatus.ARCHIVED})

    def update_content(self, title: PostTitle, content: PostContent) -> "Post":
        """Replace title and content.

        Archived posts remain editable; only published posts are locked.

        Raises:
            BusinessRuleViolationError: If the post is published
        """
        if self.status.is_published():
            raise BusinessRuleViolationError("Cannot update published post")
        return self.model_copy(update={"title": title, "content": content})

    def is_draft(self) -> bool:
        return self.status.is_draft()

    def is_published(self) -> bool:
        return self.status.is_published()

    def is_archived(self) -> bool:
        return self.status.is_archived()
