"""Publish post use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.views import PostView
from blog.domain.repository import PostRepository
from blog.domain.value import Identifier, PostId


class PublishPostRequest(BaseModel):
    """Publish post request."""

    post_id: str


class PublishPostUseCase(BaseUseCase):
    """Use case for publishing a draft post."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize publish post use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: PublishPostRequest) -> PostView:
        """Execute publish post flow.

        Args:
            request: Publish post request

        Returns:
            The published post

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post does not exist
            BusinessRuleViolationError: If the post is published or archived
        """
        with logfire.span("publish_post.execute", post_id=request.post_id):
            post_id = PostId(Identifier.from_string(request.post_id))
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", request.post_id)

            published = await self.post_repository.save(post.publish())

            logfire.info(
                "Post published",
                post_id=str(published.id),
                published_at=published.published_at,
            )
            return PostView.from_post(published)
