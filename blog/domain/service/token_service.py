"""Access token domain service."""

import logfire

from blog.config import AuthSettings
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class TokenService(Service):
    """Issues and checks the bearer tokens handed out at login."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str, role: str) -> str:
        """Issue a signed token carrying the user's id, email and role.

        Args:
            user_id: User ID
            email: User email address
            role: Role token, 'user' or 'admin'

        Returns:
            Encoded token, valid for ``jwt_expiry_days``
        """
        with logfire.span("token_service.create_token", user_id=user_id):
            token = create_token(user_id, email, role, self.auth_settings)
            logfire.info("Access token issued", user_id=user_id, role=role)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature and expiry, then return the claims.

        Raises:
            JWTError: If the token is malformed, forged or expired
        """
        with logfire.span("token_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Rejected access token", reason=str(e))
                raise
            logfire.debug("Access token accepted", user_id=payload.user_id)
            return payload
