"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository interface for Post aggregate."""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save or update a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find post by ID.

        Args:
            post_id: Post identifier

        Returns:
            Post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Post]:
        """Find all posts, newest created first.

        Returns:
            List of posts (empty if none)
        """
        pass

    @abstractmethod
    async def find_published(self) -> list[Post]:
        """Find published posts, most recently published first.

        Returns:
            List of published posts (empty if none)
        """
        pass

    @abstractmethod
    async def delete(self, post: Post) -> None:
        """Delete a post.

        Args:
            post: Post to delete
        """
        pass
