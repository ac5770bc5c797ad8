"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, Identifier


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for removing a comment."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("delete_comment.execute", comment_id=request.comment_id):
            comment_id = CommentId(Identifier.from_string(request.comment_id))
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", request.comment_id)

            await self.comment_repository.delete(comment)
            logfire.info("Comment deleted", comment_id=request.comment_id)
