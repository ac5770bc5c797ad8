"""Security infrastructure providers."""

from dishka import Scope, provide

from blog.adapter.security import PasslibPasswordHasher
from blog.domain.service import PasswordHasher
from blog.util.di.base import ProviderBase


class SecurityProvider(ProviderBase):
    """Security component base."""

    __mock_component__ = "security"


class ProdSecurityProvider(SecurityProvider):
    """Production security provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        """Provide PBKDF2-SHA256 password hasher."""
        return PasslibPasswordHasher()
