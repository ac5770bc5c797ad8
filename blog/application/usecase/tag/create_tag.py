"""Create tag use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import ConflictError
from blog.application.usecase.base import BaseUseCase
from blog.domain.model.tag import Tag
from blog.domain.repository import TagRepository
from blog.domain.value import TagColor, TagName, TagSlug


class CreateTagRequest(BaseModel):
    """Create tag request.

    The slug is derived from the name when omitted; the color defaults
    to the blue preset.
    """

    name: str
    slug: str | None = None
    color: str | None = None


class CreateTagResponse(BaseModel):
    """Create tag response."""

    tag_id: str
    slug: str


class CreateTagUseCase(BaseUseCase):
    """Use case for creating a tag."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize create tag use case.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Args:
            request: Create tag request

        Returns:
            Id and slug of the new tag

        Raises:
            ValidationError: If the name, slug or color is invalid
            ConflictError: If another tag already uses the slug
        """
        with logfire.span("create_tag.execute", name=request.name):
            name = TagName.from_string(request.name)
            slug = (
                TagSlug.from_string(request.slug)
                if request.slug
                else TagSlug.from_name(name)
            )
            color = (
                TagColor.from_string(request.color) if request.color else TagColor.blue()
            )

            if await self.tag_repository.find_by_slug(slug):
                raise ConflictError(f"Tag with slug '{slug}' already exists")

            tag = await self.tag_repository.save(
                Tag.create(name=name, slug=slug, color=color)
            )

            logfire.info("Tag created", tag_id=str(tag.id), slug=tag.slug.value)
            return CreateTagResponse(tag_id=str(tag.id), slug=tag.slug.value)
