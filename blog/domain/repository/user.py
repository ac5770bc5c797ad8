"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.user import User
from blog.domain.value import EmailAddress, UserId


class UserRepository(ABC):
    """Repository interface for User aggregate."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save or update a user.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID.

        Args:
            user_id: User identifier

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find user by email address.

        Args:
            email: Normalized email address

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Find all users, oldest first.

        Returns:
            List of users (empty if none)
        """
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user.

        Args:
            user: User to delete
        """
        pass
