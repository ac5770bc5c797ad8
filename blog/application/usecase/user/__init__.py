"""User use cases."""

from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .promote_user import PromoteUserRequest, PromoteUserUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from .views import UserView

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "PromoteUserRequest",
    "PromoteUserUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "UserView",
]
