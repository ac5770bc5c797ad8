"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.tag import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    GetTagBySlugRequest,
    GetTagBySlugUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
    TagView,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from blog.interface.api.auth import AuthenticatedUser, require_admin

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


class CreateTagAPIRequest(BaseModel):
    """API request for creating a tag."""

    name: str
    slug: str | None = None
    color: str | None = None


class UpdateTagAPIRequest(BaseModel):
    """API request for replacing a tag's properties."""

    name: str
    slug: str | None = None
    color: str


@router.get("", response_model=ListTagsResponse)
async def list_tags(list_tags_use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all tags ordered by name."""
    return await list_tags_use_case.execute(ListTagsRequest())


@router.get("/{slug}", response_model=TagView)
async def get_tag(
    slug: str,
    get_tag_use_case: FromDishka[GetTagBySlugUseCase],
) -> TagView:
    """Get a tag by slug."""
    tag = await get_tag_use_case.execute(GetTagBySlugRequest(slug=slug))
    if not tag:
        raise NotFoundError("Tag", slug)
    return tag


@router.post(
    "", response_model=CreateTagResponse, status_code=status.HTTP_201_CREATED
)
async def create_tag(
    request: CreateTagAPIRequest,
    user: FromDishka[AuthenticatedUser],
    create_tag_use_case: FromDishka[CreateTagUseCase],
) -> CreateTagResponse:
    """Create a tag. Admin only.

    Example:
        POST /tags
        {"name": "Hello World", "color": "F00"}

        Response (201):
        {"tag_id": "...", "slug": "hello-world"}
    """
    require_admin(user)
    return await create_tag_use_case.execute(
        CreateTagRequest(name=request.name, slug=request.slug, color=request.color)
    )


@router.put("/{tag_id}", response_model=TagView)
async def update_tag(
    tag_id: str,
    request: UpdateTagAPIRequest,
    user: FromDishka[AuthenticatedUser],
    update_tag_use_case: FromDishka[UpdateTagUseCase],
) -> TagView:
    """Replace a tag's name, slug and color. Admin only."""
    require_admin(user)
    return await update_tag_use_case.execute(
        UpdateTagRequest(
            tag_id=tag_id, name=request.name, slug=request.slug, color=request.color
        )
    )
