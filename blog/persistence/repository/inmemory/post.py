"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Posts are immutable, so stored instances are handed out directly.
    Dict insertion order breaks timestamp ties.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all posts, newest created first."""
        posts = list(self._posts.values())
        posts.reverse()
        posts.sort(key=lambda p: p.created_at.value, reverse=True)
        return posts

    async def find_published(self) -> list[Post]:
        """Find published posts, most recently published first."""
        posts = [p for p in self._posts.values() if p.status.is_published()]
        posts.reverse()
        posts.sort(key=lambda p: p.published_at, reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._posts[post.id] = post
        return post

    async def delete(self, post: Post) -> None:
        """Delete a post."""
        self._posts.pop(post.id, None)
