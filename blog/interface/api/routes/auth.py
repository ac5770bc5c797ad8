"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from blog.application.error import AuthenticationError
from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from blog.application.usecase.user import UserView
from blog.config import Settings
from blog.interface.api.auth import extract_token

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """Email/password credentials."""

    email: str
    password: str


class LoginAPIResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: UserView | None = None


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Exchange credentials for an access token.

    The token is returned in the body and also set as an HTTP-only cookie
    for browser clients.

    Example:
        POST /auth/login
        {"email": "alice@example.com", "password": "..."}

        Response:
        {"token": "eyJ...", "user_id": "123e4567-e89b-42d3-a456-426614174000"}
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )

    # Secure cookies need HTTPS, so only in production
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=result.token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )

    return LoginAPIResponse(token=result.token, user_id=result.user_id)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a token: an absent, expired or orphaned token
    yields ``authenticated=false`` instead of an error.
    """
    token = extract_token(request, settings.auth.cookie_name)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except AuthenticationError as e:
        logfire.debug("Token rejected on /auth/me", error=str(e))
        return AuthStatusResponse(authenticated=False)

    return AuthStatusResponse(authenticated=True, user=user)
