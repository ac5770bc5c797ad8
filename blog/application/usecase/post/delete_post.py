"""Delete post use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import Identifier, PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post together with its comments."""

    def __init__(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Args:
            request: Delete post request

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("delete_post.execute", post_id=request.post_id):
            post_id = PostId(Identifier.from_string(request.post_id))
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", request.post_id)

            comments = await self.comment_repository.find_by_post_id(post_id)
            for comment in comments:
                await self.comment_repository.delete(comment)
            await self.post_repository.delete(post)

            logfire.info(
                "Post deleted", post_id=request.post_id, comments_deleted=len(comments)
            )
