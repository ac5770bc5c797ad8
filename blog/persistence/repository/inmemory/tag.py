"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import TagId, TagSlug


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing.

    Mirrors the unique index on slug: saving a tag whose slug belongs to
    another tag raises ValueError.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._slug_index: dict[str, TagId] = {}

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        holder = self._slug_index.get(tag.slug.value)
        if holder is not None and holder != tag.id:
            raise ValueError(f"Duplicate tag slug: {tag.slug}")

        previous = self._tags.get(tag.id)
        if previous:
            self._slug_index.pop(previous.slug.value, None)

        self._tags[tag.id] = tag
        self._slug_index[tag.slug.value] = tag.id
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._tags.get(tag_id)

    async def find_by_slug(self, slug: TagSlug) -> Optional[Tag]:
        """Find tag by slug."""
        tag_id = self._slug_index.get(slug.value)
        return self._tags.get(tag_id) if tag_id else None

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        return sorted(self._tags.values(), key=lambda t: (t.name.value, t.slug.value))

    async def delete(self, tag: Tag) -> None:
        """Delete a tag."""
        stored = self._tags.pop(tag.id, None)
        if stored:
            self._slug_index.pop(stored.slug.value, None)
