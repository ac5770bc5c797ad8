"""Get tag by slug use case."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.tag.views import TagView
from blog.domain.repository import TagRepository
from blog.domain.value import TagSlug


class GetTagBySlugRequest(BaseModel):
    """Get tag request."""

    slug: str


class GetTagBySlugUseCase(BaseUseCase):
    """Use case for looking up a tag by its slug."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize get tag use case.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def execute(self, request: GetTagBySlugRequest) -> Optional[TagView]:
        """Execute get tag flow.

        Returns:
            Tag details if found, None otherwise

        Raises:
            ValidationError: If the slug is malformed
        """
        tag = await self.tag_repository.find_by_slug(TagSlug.from_string(request.slug))
        return TagView.from_tag(tag) if tag else None
