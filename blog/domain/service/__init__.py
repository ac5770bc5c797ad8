"""Domain services and collaborator interfaces."""

from .base import Service
from .password_hasher import PasswordHasher
from .token_service import TokenService
from .translation import TranslationLoader

__all__ = [
    "PasswordHasher",
    "Service",
    "TokenService",
    "TranslationLoader",
]
