"""Update post content use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.views import PostView
from blog.domain.repository import PostRepository
from blog.domain.value import Identifier, PostContent, PostId, PostTitle


class UpdatePostContentRequest(BaseModel):
    """Update post content request."""

    post_id: str
    title: str
    content: str


class UpdatePostContentUseCase(BaseUseCase):
    """Use case for replacing a post's title and content."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize update post content use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: UpdatePostContentRequest) -> PostView:
        """Execute update post content flow.

        Title and content are validated before the post is loaded, so
        malformed input fails even for unknown posts.

        Args:
            request: Update request with new title and content

        Returns:
            The updated post

        Raises:
            ValidationError: If the id, title or content is invalid
            NotFoundError: If the post does not exist
            BusinessRuleViolationError: If the post is published
        """
        with logfire.span("update_post_content.execute", post_id=request.post_id):
            post_id = PostId(Identifier.from_string(request.post_id))
            title = PostTitle.from_string(request.title)
            content = PostContent.from_string(request.content)

            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", request.post_id)

            updated = await self.post_repository.save(
                post.update_content(title=title, content=content)
            )

            logfire.info("Post content updated", post_id=str(updated.id))
            return PostView.from_post(updated)
