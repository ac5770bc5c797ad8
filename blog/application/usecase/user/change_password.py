"""Change password use case."""

import logfire
from pydantic import BaseModel, Field

from blog.application.error import AuthenticationError, NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.domain.repository import UserRepository
from blog.domain.service import PasswordHasher
from blog.domain.value import Identifier, UserId


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str
    current_password: str
    new_password: str = Field(min_length=1)


class ChangePasswordUseCase(BaseUseCase):
    """Use case for replacing a user's password."""

    def __init__(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        """Initialize change password use case.

        Args:
            user_repository: User repository
            password_hasher: Password hashing implementation
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, request: ChangePasswordRequest) -> None:
        """Execute change password flow.

        Args:
            request: Change password request

        Raises:
            NotFoundError: If the user does not exist
            AuthenticationError: If the current password does not match
        """
        with logfire.span("change_password.execute", user_id=request.user_id):
            user_id = UserId(Identifier.from_string(request.user_id))
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", request.user_id)

            if not self.password_hasher.verify(
                request.current_password, user.password_hash
            ):
                raise AuthenticationError("Current password is incorrect")

            new_hash = self.password_hasher.hash(request.new_password)
            await self.user_repository.save(user.change_password(new_hash))

            logfire.info("Password changed", user_id=request.user_id)
