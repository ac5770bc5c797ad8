"""Plain-data projections of tags."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model.tag import Tag


class TagView(BaseModel):
    """Tag as returned to callers."""

    tag_id: str
    name: str
    slug: str
    color: str
    created_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagView":
        return cls(
            tag_id=str(tag.id),
            name=tag.name.value,
            slug=tag.slug.value,
            color=tag.color.value,
            created_at=tag.created_at.value,
        )
