"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.post import (
    ArchivePostRequest,
    ArchivePostUseCase,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostView,
    PublishPostRequest,
    PublishPostUseCase,
    UpdatePostContentRequest,
    UpdatePostContentUseCase,
)
from blog.interface.api.auth import AuthenticatedUser, require_admin
from blog.interface.error import NotAuthorizedError

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    content: str


class CreatePostAPIResponse(BaseModel):
    """API response for a new post."""

    id: str


class UpdatePostAPIRequest(BaseModel):
    """API request for replacing a post's title and content."""

    title: str
    content: str


async def _load_editable(
    post_id: str, user: AuthenticatedUser, get_post_use_case: GetPostUseCase
) -> PostView:
    """Load a post the caller may change: their own, or any post for admins.

    Raises:
        NotFoundError: If the post does not exist
        NotAuthorizedError: If the caller is neither author nor admin
    """
    post = await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    if not post:
        raise NotFoundError("Post", post_id)
    if post.author_id != user.user_id and not user.is_admin:
        raise NotAuthorizedError("Only the author or an admin can change this post")
    return post


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    published: bool = False,
) -> ListPostsResponse:
    """List posts.

    Args:
        list_posts_use_case: List posts use case from DI
        published: Only return published posts, most recently published first

    Returns:
        Posts and their count
    """
    return await list_posts_use_case.execute(ListPostsRequest(only_published=published))


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a post by ID.

    Raises:
        NotFoundError: If the post does not exist (404)
    """
    post = await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    if not post:
        raise NotFoundError("Post", post_id)
    return post


@router.post(
    "", response_model=CreatePostAPIResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    request: CreatePostAPIRequest,
    user: FromDishka[AuthenticatedUser],
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostAPIResponse:
    """Create a draft post authored by the caller.

    Example:
        POST /posts
        {"title": "My First Post", "content": "Hello from the blog backend"}

        Response (201):
        {"id": "..."}
    """
    result = await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title, content=request.content, author_id=user.user_id
        )
    )
    return CreatePostAPIResponse(id=result.post_id)


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    user: FromDishka[AuthenticatedUser],
    get_post_use_case: FromDishka[GetPostUseCase],
    update_post_content_use_case: FromDishka[UpdatePostContentUseCase],
) -> PostView:
    """Replace a post's title and content. Published posts are locked (409)."""
    await _load_editable(post_id, user, get_post_use_case)
    return await update_post_content_use_case.execute(
        UpdatePostContentRequest(
            post_id=post_id, title=request.title, content=request.content
        )
    )


@router.post("/{post_id}/publish", response_model=PostView)
async def publish_post(
    post_id: str,
    user: FromDishka[AuthenticatedUser],
    get_post_use_case: FromDishka[GetPostUseCase],
    publish_post_use_case: FromDishka[PublishPostUseCase],
) -> PostView:
    """Publish a draft post."""
    await _load_editable(post_id, user, get_post_use_case)
    return await publish_post_use_case.execute(PublishPostRequest(post_id=post_id))


@router.post("/{post_id}/archive", response_model=PostView)
async def archive_post(
    post_id: str,
    user: FromDishka[AuthenticatedUser],
    get_post_use_case: FromDishka[GetPostUseCase],
    archive_post_use_case: FromDishka[ArchivePostUseCase],
) -> PostView:
    """Archive a draft or published post."""
    await _load_editable(post_id, user, get_post_use_case)
    return await archive_post_use_case.execute(ArchivePostRequest(post_id=post_id))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    user: FromDishka[AuthenticatedUser],
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> None:
    """Delete a post together with its comments. Admin only."""
    require_admin(user)
    await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))
