"""Get comment use case."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.views import CommentView
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, Identifier


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str


class GetCommentUseCase(BaseUseCase):
    """Use case for retrieving a comment by ID."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def execute(self, request: GetCommentRequest) -> Optional[CommentView]:
        """Execute get comment flow.

        Returns:
            Comment details if found, None otherwise

        Raises:
            ValidationError: If the comment id is malformed
        """
        comment = await self.comment_repository.find_by_id(
            CommentId(Identifier.from_string(request.comment_id))
        )
        if not comment:
            return None

        return CommentView.from_comment(comment)
