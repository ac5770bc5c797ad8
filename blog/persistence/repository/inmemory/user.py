"""In-memory user repository for testing."""

from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import EmailAddress, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by normalized email address."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Find all users, oldest first."""
        return sorted(self._users.values(), key=lambda u: u.created_at.value)

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user
        return user

    async def delete(self, user: User) -> None:
        """Delete a user."""
        self._users.pop(user.id, None)
