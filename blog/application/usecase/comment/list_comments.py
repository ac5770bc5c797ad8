"""List comments use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.views import CommentView
from blog.domain.repository import CommentRepository
from blog.domain.value import Identifier, PostId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str


class ListCommentsResponse(BaseModel):
    """List comments response, oldest comment first."""

    comments: list[CommentView]


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing the comments on a post."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize list comments use case.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        An unknown post simply has no comments.

        Args:
            request: List comments request

        Returns:
            Comments on the post

        Raises:
            ValidationError: If the post id is malformed
        """
        post_id = PostId(Identifier.from_string(request.post_id))
        comments = await self.comment_repository.find_by_post_id(post_id)

        return ListCommentsResponse(
            comments=[CommentView.from_comment(comment) for comment in comments]
        )
