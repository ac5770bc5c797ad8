"""Register user use case."""

import logfire
from pydantic import BaseModel, Field

from blog.application.error import ConflictError
from blog.application.usecase.base import BaseUseCase
from blog.domain.model.user import User
from blog.domain.repository import UserRepository
from blog.domain.service import PasswordHasher
from blog.domain.value import EmailAddress


class RegisterUserRequest(BaseModel):
    """Register user request."""

    email: str
    password: str = Field(min_length=1)


class RegisterUserResponse(BaseModel):
    """Register user response."""

    user_id: str


class RegisterUserUseCase(BaseUseCase):
    """Use case for registering a new user account."""

    def __init__(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        """Initialize register user use case.

        Args:
            user_repository: User repository
            password_hasher: Password hashing implementation
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Steps:
        1. Validate the email address
        2. Reject emails that are already registered
        3. Hash the password and create the User entity
        4. Save user

        Args:
            request: Register user request

        Returns:
            Id of the new user

        Raises:
            ValidationError: If the email address is invalid
            ConflictError: If the email address is already registered
        """
        email = EmailAddress.from_string(request.email)

        with logfire.span("register_user.execute", email=email.value):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration rejected, email taken", email=email.value)
                raise ConflictError("User with this email already exists")

            password_hash = self.password_hasher.hash(request.password)
            user = await self.user_repository.save(
                User.create(email=email, password_hash=password_hash)
            )

            logfire.info("User registered", user_id=str(user.id))
            return RegisterUserResponse(user_id=str(user.id))
