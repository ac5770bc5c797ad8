"""Password hashing backed by passlib."""

import logfire
from passlib.hash import pbkdf2_sha256

from blog.domain.service.password_hasher import PasswordHasher


class PasslibPasswordHasher(PasswordHasher):
    """PBKDF2-SHA256 password hasher.

    Hashes use passlib's modular crypt format, so salt and round count
    travel with the stored value.
    """

    def __init__(self, rounds: int | None = None) -> None:
        """Initialize hasher.

        Args:
            rounds: PBKDF2 iteration count (passlib default if None)
        """
        self._handler = pbkdf2_sha256.using(rounds=rounds) if rounds else pbkdf2_sha256

    def hash(self, plaintext: str) -> str:
        return self._handler.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return self._handler.verify(plaintext, hashed)
        except ValueError as e:
            # Stored value is not a pbkdf2_sha256 hash
            logfire.warn("Unrecognized password hash format", error=str(e))
            return False
