"""User account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from blog.application.usecase.user import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    PromoteUserRequest,
    PromoteUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    UserView,
)
from blog.interface.api.auth import AuthenticatedUser, require_admin

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering an account."""

    email: str
    password: str = Field(min_length=1)


class RegisterAPIResponse(BaseModel):
    """API response for a new account."""

    id: str
    message: str


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the caller's password."""

    current_password: str
    new_password: str = Field(min_length=1)


@router.post(
    "/register",
    response_model=RegisterAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterAPIResponse:
    """Register a new account with the default role.

    Example:
        POST /register
        {"email": "alice@example.com", "password": "s3cret"}

        Response (201):
        {"id": "...", "message": "User registered successfully"}
    """
    result = await register_user_use_case.execute(
        RegisterUserRequest(email=request.email, password=request.password)
    )
    return RegisterAPIResponse(id=result.user_id, message="User registered successfully")


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    user: FromDishka[AuthenticatedUser],
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List all accounts, oldest first. Admin only."""
    require_admin(user)
    return await list_users_use_case.execute(ListUsersRequest())


@router.post("/users/me/password", status_code=status.HTTP_204_NO_CONTENT)
async def change_my_password(
    request: ChangePasswordAPIRequest,
    user: FromDishka[AuthenticatedUser],
    change_password_use_case: FromDishka[ChangePasswordUseCase],
) -> None:
    """Change the caller's password after checking the current one."""
    await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=user.user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )


@router.post("/users/{user_id}/promote", response_model=UserView)
async def promote_user(
    user_id: str,
    user: FromDishka[AuthenticatedUser],
    promote_user_use_case: FromDishka[PromoteUserUseCase],
) -> UserView:
    """Grant the admin role to a user. Admin only."""
    require_admin(user)
    return await promote_user_use_case.execute(PromoteUserRequest(user_id=user_id))
