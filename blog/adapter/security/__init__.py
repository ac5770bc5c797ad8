"""Password hashing adapter."""

from .passlib_hasher import PasslibPasswordHasher

__all__ = ["PasslibPasswordHasher"]
