"""PostgreSQL implementation of Comment repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == str(comment_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post_id(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, oldest first."""
        with logfire.span("comment_repository.find_by_post_id", post_id=str(post_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == str(post_id))
                .order_by(comments_table.c.created_at, comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        exists = await self.session.execute(
            select(comments_table.c.id).where(comments_table.c.id == str(comment.id))
        )
        if exists.first():
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == str(comment.id))
                .values(**comment_dict)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment: Comment) -> None:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == str(comment.id))
        await self.session.execute(stmt)
        await self.session.flush()
