"""Comment entity."""

from blog.domain.model.common import DomainModel
from blog.domain.value import (
    CommentContent,
    CommentId,
    CreationTimestamp,
    Identifier,
    PostId,
    UserId,
)


class Comment(DomainModel):
    """Comment left by a user on a post.

    Holds references to its post and author by id only.
    """

    id: CommentId
    content: CommentContent
    post_id: PostId
    author_id: UserId
    created_at: CreationTimestamp

    @classmethod
    def create(
        cls, content: CommentContent, post_id: PostId, author_id: UserId
    ) -> "Comment":
        """Create a new comment with a fresh id and creation time."""
        return cls._construct(
            id=CommentId(Identifier.generate()),
            content=content,
            post_id=post_id,
            author_id=author_id,
            created_at=CreationTimestamp.now(),
        )

    @classmethod
    def reconstitute(
        cls,
        id: CommentId,
        content: CommentContent,
        post_id: PostId,
        author_id: UserId,
        created_at: CreationTimestamp,
    ) -> "Comment":
        """Rebuild a comment loaded from storage."""
        return cls._construct(
            id=id,
            content=content,
            post_id=post_id,
            author_id=author_id,
            created_at=created_at,
        )

    def update_content(self, content: CommentContent) -> "Comment":
        """Replace the comment body."""
        return self.model_copy(update={"content": content})
