"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.value import TagId, TagSlug


class TagRepository(ABC):
    """Repository interface for Tag entity.

    Implementations must keep slugs unique.
    """

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: TagSlug) -> Optional[Tag]:
        """Find tag by slug.

        Args:
            slug: Tag slug

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name.

        Returns:
            List of tags (empty if none)
        """
        pass

    @abstractmethod
    async def delete(self, tag: Tag) -> None:
        """Delete a tag.

        Args:
            tag: Tag to delete
        """
        pass
