"""Update comment use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.views import CommentView
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentContent, CommentId, Identifier


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    content: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for replacing a comment's content."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize update comment use case.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            ValidationError: If the id or content is invalid
            NotFoundError: If the comment does not exist
        """
        with logfire.span("update_comment.execute", comment_id=request.comment_id):
            comment_id = CommentId(Identifier.from_string(request.comment_id))
            content = CommentContent.from_string(request.content)

            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", request.comment_id)

            updated = await self.comment_repository.save(comment.update_content(content))

            logfire.info("Comment updated", comment_id=str(updated.id))
            return CommentView.from_comment(updated)
