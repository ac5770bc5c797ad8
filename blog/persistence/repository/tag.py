"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import TagId, TagSlug
from blog.persistence.mappers import row_to_tag, tag_to_dict
from blog.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository.

    Slug uniqueness is backed by a unique index on tags.slug.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        tag_dict = tag_to_dict(tag)

        existing = await self.find_by_id(tag.id)

        if existing:
            stmt = (
                update(tags_table)
                .where(tags_table.c.id == str(tag.id))
                .values(**tag_dict)
            )
        else:
            stmt = insert(tags_table).values(**tag_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == str(tag_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_slug(self, slug: TagSlug) -> Optional[Tag]:
        """Find tag by slug."""
        stmt = select(tags_table).where(tags_table.c.slug == slug.value)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name, tags_table.c.slug)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def delete(self, tag: Tag) -> None:
        """Delete a tag."""
        stmt = delete(tags_table).where(tags_table.c.id == str(tag.id))
        await self.session.execute(stmt)
        await self.session.flush()
