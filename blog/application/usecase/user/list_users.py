"""List users use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.user.views import UserView
from blog.domain.repository import UserRepository


class ListUsersRequest(BaseModel):
    """List users request."""

    pass


class ListUsersResponse(BaseModel):
    """List users response, oldest account first."""

    users: list[UserView]


class ListUsersUseCase(BaseUseCase):
    """Use case for listing registered users."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        users = await self.user_repository.find_all()
        return ListUsersResponse(users=[UserView.from_user(user) for user in users])
