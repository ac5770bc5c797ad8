"""Create post use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import Identifier, PostContent, PostTitle, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    author_id: str  # User ID from authenticated user


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: str


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new draft post."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize create post use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate title, content and author id (value objects)
        2. Create draft Post entity
        3. Save post

        Args:
            request: Create post request

        Returns:
            Id of the new post

        Raises:
            ValidationError: If any field is invalid
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            title = PostTitle.from_string(request.title)
            content = PostContent.from_string(request.content)
            author_id = UserId(Identifier.from_string(request.author_id))

            post = Post.create(title=title, content=content, author_id=author_id)
            saved_post = await self.post_repository.save(post)

            logfire.info(
                "Post created", post_id=str(saved_post.id), title=saved_post.title.value
            )

            return CreatePostResponse(post_id=str(saved_post.id))
