"""List tags use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.tag.views import TagView
from blog.domain.repository import TagRepository


class ListTagsRequest(BaseModel):
    """List tags request."""

    pass


class ListTagsResponse(BaseModel):
    """List tags response, ordered by name."""

    tags: list[TagView]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing all tags."""

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        tags = await self.tag_repository.find_all()
        return ListTagsResponse(tags=[TagView.from_tag(tag) for tag in tags])
