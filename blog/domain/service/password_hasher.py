"""Password hashing interface."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Generic password hashing interface.

    Implementations live in the adapter layer. Hashes are opaque strings
    that only the same implementation can verify.
    """

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Hash a plaintext password.

        Args:
            plaintext: Password as typed by the user

        Returns:
            Encoded hash suitable for storage
        """
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            plaintext: Password as typed by the user
            hashed: Previously stored hash

        Returns:
            True if the password matches
        """
        pass
