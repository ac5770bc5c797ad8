"""Create comment use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import CommentContent, Identifier, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str
    post_id: str
    author_id: str  # User ID from authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate content, post id and author id (value objects)
        2. Ensure the post exists
        3. Create and save the Comment entity

        Args:
            request: Create comment request

        Returns:
            Id of the new comment

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "create_comment.execute",
            post_id=request.post_id,
            author_id=request.author_id,
        ):
            content = CommentContent.from_string(request.content)
            post_id = PostId(Identifier.from_string(request.post_id))
            author_id = UserId(Identifier.from_string(request.author_id))

            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", request.post_id)

            comment = Comment.create(
                content=content, post_id=post_id, author_id=author_id
            )
            saved = await self.comment_repository.save(comment)

            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id)
            )
            return CreateCommentResponse(comment_id=str(saved.id))
