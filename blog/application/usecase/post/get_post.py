"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.views import PostView
from blog.domain.repository import PostRepository
from blog.domain.value import Identifier, PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving a post by ID."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize get post use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: GetPostRequest) -> Optional[PostView]:
        """Execute get post flow.

        Args:
            request: Get post request with post ID

        Returns:
            Post details if found, None otherwise

        Raises:
            ValidationError: If the post id is malformed
        """
        post = await self.post_repository.find_by_id(
            PostId(Identifier.from_string(request.post_id))
        )
        if not post:
            return None

        return PostView.from_post(post)
