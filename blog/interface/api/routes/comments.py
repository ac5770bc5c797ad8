"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.comment import (
    CommentView,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.interface.api.auth import AuthenticatedUser, require_admin
from blog.interface.error import NotAuthorizedError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request carrying comment content."""

    content: str


class CreateCommentAPIResponse(BaseModel):
    """API response for a new comment."""

    id: str


class CommentListResponse(BaseModel):
    """Comments on a post, oldest first."""

    data: list[CommentView]


@router.get("/posts/{post_id}/comments", response_model=CommentListResponse)
async def list_comments(
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> CommentListResponse:
    """List the comments on a post.

    Example:
        GET /posts/{post_id}/comments

        Response:
        {"data": [{"id": "...", "content": "Nice post", ...}]}
    """
    result = await list_comments_use_case.execute(ListCommentsRequest(post_id=post_id))
    return CommentListResponse(data=result.comments)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CommentAPIRequest,
    user: FromDishka[AuthenticatedUser],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentAPIResponse:
    """Comment on a post as the caller."""
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            content=request.content, post_id=post_id, author_id=user.user_id
        )
    )
    return CreateCommentAPIResponse(id=result.comment_id)


@router.put("/comments/{comment_id}", response_model=CommentView)
async def update_comment(
    comment_id: str,
    request: CommentAPIRequest,
    user: FromDishka[AuthenticatedUser],
    get_comment_use_case: FromDishka[GetCommentUseCase],
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentView:
    """Replace a comment's content. Only its author or an admin may do so.

    Raises:
        NotFoundError: If the comment does not exist (404)
        NotAuthorizedError: If the caller is neither author nor admin (403)
    """
    comment = await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id)
    )
    if not comment:
        raise NotFoundError("Comment", comment_id)
    if comment.author_id != user.user_id and not user.is_admin:
        raise NotAuthorizedError("Only the author or an admin can change this comment")

    return await update_comment_use_case.execute(
        UpdateCommentRequest(comment_id=comment_id, content=request.content)
    )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    user: FromDishka[AuthenticatedUser],
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Remove a comment. Admin only."""
    require_admin(user)
    await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=comment_id))
