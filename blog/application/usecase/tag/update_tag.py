"""Update tag use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import ConflictError, NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.tag.views import TagView
from blog.domain.repository import TagRepository
from blog.domain.value import Identifier, TagColor, TagId, TagName, TagSlug


class UpdateTagRequest(BaseModel):
    """Update tag request.

    Name, slug and color are replaced together. A missing slug is
    derived from the new name.
    """

    tag_id: str
    name: str
    slug: str | None = None
    color: str


class UpdateTagUseCase(BaseUseCase):
    """Use case for replacing a tag's properties."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize update tag use case.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def execute(self, request: UpdateTagRequest) -> TagView:
        """Execute update tag flow.

        Args:
            request: Update tag request

        Returns:
            The updated tag

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the tag does not exist
            ConflictError: If another tag already uses the slug
        """
        with logfire.span("update_tag.execute", tag_id=request.tag_id):
            tag_id = TagId(Identifier.from_string(request.tag_id))
            name = TagName.from_string(request.name)
            slug = (
                TagSlug.from_string(request.slug)
                if request.slug
                else TagSlug.from_name(name)
            )
            color = TagColor.from_string(request.color)

            tag = await self.tag_repository.find_by_id(tag_id)
            if not tag:
                raise NotFoundError("Tag", request.tag_id)

            holder = await self.tag_repository.find_by_slug(slug)
            if holder and holder.id != tag.id:
                raise ConflictError(f"Tag with slug '{slug}' already exists")

            updated = await self.tag_repository.save(
                tag.update_properties(name=name, slug=slug, color=color)
            )

            logfire.info("Tag updated", tag_id=str(updated.id), slug=updated.slug.value)
            return TagView.from_tag(updated)
