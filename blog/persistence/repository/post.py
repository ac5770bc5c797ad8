"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId, PostStatus
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == str(post_id))
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.debug("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def find_all(self) -> list[Post]:
        """Find all posts, newest created first."""
        stmt = select(posts_table).order_by(posts_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_published(self) -> list[Post]:
        """Find published posts, most recently published first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.status == PostStatus.PUBLISHED.value)
            .order_by(posts_table.c.published_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), status=post.status.value
        ):
            post_dict = post_to_dict(post)

            exists = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == str(post.id))
            )
            if exists.first():
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == str(post.id))
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = insert(posts_table).values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post: Post) -> None:
        """Delete a post. Its comments go with it (ON DELETE CASCADE)."""
        stmt = delete(posts_table).where(posts_table.c.id == str(post.id))
        await self.session.execute(stmt)
        await self.session.flush()
