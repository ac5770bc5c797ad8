"""Get current user use case."""

from pydantic import BaseModel

from blog.application.error import AuthenticationError
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.user.views import UserView
from blog.domain.error import ValidationError
from blog.domain.repository import UserRepository
from blog.domain.service import TokenService
from blog.domain.value import Identifier, UserId
from blog.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the user behind an access token."""

    def __init__(
        self, token_service: TokenService, user_repository: UserRepository
    ) -> None:
        """Initialize get current user use case.

        Args:
            token_service: Access token domain service
            user_repository: User repository
        """
        self.token_service = token_service
        self.user_repository = user_repository

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Execute get current user flow.

        The role is read from storage rather than from the token, so a
        promotion takes effect without logging in again.

        Args:
            request: Request carrying the access token

        Returns:
            Current user details

        Raises:
            AuthenticationError: If the token is invalid or its user is gone
        """
        try:
            payload = self.token_service.verify_token(request.token)
            user_id = UserId(Identifier.from_string(payload.user_id))
        except (JWTError, ValidationError) as e:
            raise AuthenticationError(str(e)) from e

        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise AuthenticationError("User no longer exists")

        return UserView.from_user(user)
