"""Interface layer DI providers."""

from dishka import Scope, provide
from fastapi import Request

from blog.application.error import AuthenticationError
from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from blog.config import AuthSettings
from blog.interface.api.auth import AuthenticatedUser, extract_token
from blog.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Request principal provider - concrete, no mocks needed.

    ``Request`` comes from dishka's FastapiProvider, which must be part of
    any container this provider is used in.
    """

    @provide(scope=Scope.REQUEST)
    async def get_authenticated_user(
        self,
        request: Request,
        auth_settings: AuthSettings,
        get_current_user_use_case: GetCurrentUserUseCase,
    ) -> AuthenticatedUser:
        """Resolve the caller from the request's access token.

        Raises:
            AuthenticationError: If no token is present or it is rejected
        """
        token = extract_token(request, auth_settings.cookie_name)
        if not token:
            raise AuthenticationError("Authentication required")

        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
        return AuthenticatedUser.from_view(user)
