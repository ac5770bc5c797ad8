"""Promote user use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import NotFoundError
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.user.views import UserView
from blog.domain.repository import UserRepository
from blog.domain.value import Identifier, UserId


class PromoteUserRequest(BaseModel):
    """Promote user request."""

    user_id: str


class PromoteUserUseCase(BaseUseCase):
    """Use case for granting a user the admin role."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: PromoteUserRequest) -> UserView:
        """Execute promote user flow.

        Promoting an admin again is a no-op.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("promote_user.execute", user_id=request.user_id):
            user_id = UserId(Identifier.from_string(request.user_id))
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", request.user_id)

            promoted = await self.user_repository.save(user.promote_to_admin())

            logfire.info("User promoted to admin", user_id=request.user_id)
            return UserView.from_user(promoted)
