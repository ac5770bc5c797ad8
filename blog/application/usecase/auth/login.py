"""Login use case."""

import logfire
from pydantic import BaseModel

from blog.application.error import AuthenticationError
from blog.application.usecase.base import BaseUseCase
from blog.domain.error import ValidationError
from blog.domain.repository import UserRepository
from blog.domain.service import PasswordHasher, TokenService
from blog.domain.value import EmailAddress


class LoginRequest(BaseModel):
    """Login request with email/password credentials."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    role: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for an access token."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_repository: User repository
            password_hasher: Password hashing implementation
            token_service: Access token domain service
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Unknown emails, malformed emails and wrong passwords all produce
        the same error.

        Args:
            request: Login request

        Returns:
            Access token and user info

        Raises:
            AuthenticationError: If the credentials are rejected
        """
        with logfire.span("login.execute"):
            try:
                email = EmailAddress.from_string(request.email)
            except ValidationError as e:
                raise AuthenticationError("Invalid credentials") from e

            user = await self.user_repository.find_by_email(email)
            if not user or not self.password_hasher.verify(
                request.password, user.password_hash
            ):
                logfire.warn("Login rejected", email=email.value)
                raise AuthenticationError("Invalid credentials")

            token = self.token_service.create_token(
                user_id=str(user.id), email=user.email.value, role=user.role.value
            )

            logfire.info("User logged in", user_id=str(user.id))
            return LoginResponse(
                token=token, user_id=str(user.id), role=user.role.value
            )
