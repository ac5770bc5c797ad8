"""Archive post use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.views import PostView
from blog.domain.repository import PostRepository
from blog.domain.value import Identifier, PostId


class ArchivePostRequest(BaseModel):
    """Archive post request."""

    post_id: str


class ArchivePostUseCase(BaseUseCase):
    """Use case for archiving a draft or published post."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: ArchivePostRequest) -> PostView:
        """Execute archive post flow.

        Raises:
            NotFoundError: If the post does not exist
            BusinessRuleViolationError: If the post is already archived
        """
        with logfire.span("archive_post.execute", post_id=request.post_id):
            post_id = PostId(Identifier.from_string(request.post_id))
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", request.post_id)

            archived = await self.post_repository.save(post.archive())

            logfire.info("Post archived", post_id=str(archived.id))
            return PostView.from_post(archived)
