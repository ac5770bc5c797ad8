"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository interface for Comment entity."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment.

        Args:
            comment: Comment to save

        Returns:
            Saved comment
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find comment by ID.

        Args:
            comment_id: Comment identifier

        Returns:
            Comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post_id(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, oldest first.

        Args:
            post_id: Post identifier

        Returns:
            List of comments (empty if none)
        """
        pass

    @abstractmethod
    async def delete(self, comment: Comment) -> None:
        """Delete a comment.

        Args:
            comment: Comment to delete
        """
        pass
