"""Authenticated principal for route handlers.

The ``User`` entity carries no framework concerns. Routes that need a caller
receive an ``AuthenticatedUser`` built from the access token by the DI
container (see ``blog.util.di.interface``).
"""

from fastapi import Request
from pydantic import BaseModel, ConfigDict

from blog.application.usecase.user import UserView
from blog.domain.value import UserRole
from blog.interface.error import NotAuthorizedError


class AuthenticatedUser(BaseModel):
    """Caller identity resolved from a valid access token."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin()

    @classmethod
    def from_view(cls, view: UserView) -> "AuthenticatedUser":
        return cls(
            user_id=view.user_id,
            email=view.email,
            role=UserRole.from_string(view.role),
        )


def extract_token(request: Request, cookie_name: str) -> str | None:
    """Read the access token from the auth cookie or a Bearer header.

    Args:
        request: Incoming request
        cookie_name: Name of the cookie set at login

    Returns:
        Raw token, or None if the request carries none
    """
    token = request.cookies.get(cookie_name)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def require_admin(user: AuthenticatedUser) -> AuthenticatedUser:
    """Ensure the caller is an administrator.

    Raises:
        NotAuthorizedError: If the caller is not an admin
    """
    if not user.is_admin:
        raise NotAuthorizedError("Administrator role required")
    return user
