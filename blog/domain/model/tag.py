"""Tag entity for categorizing posts."""

from blog.domain.model.common import DomainModel
from blog.domain.value import (
    CreationTimestamp,
    Identifier,
    TagColor,
    TagId,
    TagName,
    TagSlug,
)


class Tag(DomainModel):
    """Tag with a display name, a unique slug and a color.

    Slug uniqueness is enforced by storage, not by the entity.
    """

    id: TagId
    name: TagName
    slug: TagSlug
    color: TagColor
    created_at: CreationTimestamp

    @classmethod
    def create(cls, name: TagName, slug: TagSlug, color: TagColor) -> "Tag":
        """Create a new tag with a fresh id and creation time."""
        return cls._construct(
            id=TagId(Identifier.generate()),
            name=name,
            slug=slug,
            color=color,
            created_at=CreationTimestamp.now(),
        )

    @classmethod
    def reconstitute(
        cls,
        id: TagId,
        name: TagName,
        slug: TagSlug,
        color: TagColor,
        created_at: CreationTimestamp,
    ) -> "Tag":
        """Rebuild a tag loaded from storage."""
        return cls._construct(
            id=id, name=name, slug=slug, color=color, created_at=created_at
        )

    def update_properties(
        self, name: TagName, slug: TagSlug, color: TagColor
    ) -> "Tag":
        """Replace name, slug and color together."""
        return self.model_copy(update={"name": name, "slug": slug, "color": color})
