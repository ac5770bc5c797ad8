"""List posts use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.views import PostView
from blog.domain.repository import PostRepository


class ListPostsRequest(BaseModel):
    """List posts request."""

    only_published: bool = False


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]
    total: int


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts.

    All posts come newest-created first; published posts come
    most-recently-published first.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize list posts use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request

        Returns:
            Matching posts
        """
        with logfire.span("list_posts.execute", only_published=request.only_published):
            if request.only_published:
                posts = await self.post_repository.find_published()
            else:
                posts = await self.post_repository.find_all()

            items = [PostView.from_post(post) for post in posts]
            logfire.info("Posts listed", count=len(items))

            return ListPostsResponse(posts=items, total=len(items))
