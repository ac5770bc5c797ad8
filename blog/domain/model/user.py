"""User aggregate root."""

from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import (
    CreationTimestamp,
    EmailAddress,
    Identifier,
    UserId,
    UserRole,
)


class User(DomainModel):
    """Registered user.

    The password hash is an opaque credential produced by a PasswordHasher.
    The entity never sees plaintext passwords.
    """

    id: UserId
    email: EmailAddress
    password_hash: str = Field(min_length=1)
    role: UserRole
    created_at: CreationTimestamp

    @classmethod
    def create(
        cls,
        email: EmailAddress,
        password_hash: str,
        role: Optional[UserRole] = None,
    ) -> "User":
        """Create a new user; the role defaults to a regular user."""
        return cls._construct(
            id=UserId(Identifier.generate()),
            email=email,
            password_hash=password_hash,
            role=role or UserRole.default(),
            created_at=CreationTimestamp.now(),
        )

    @classmethod
    def reconstitute(
        cls,
        id: UserId,
        email: EmailAddress,
        password_hash: str,
        role: UserRole,
        created_at: CreationTimestamp,
    ) -> "User":
        """Rebuild a user loaded from storage."""
        return cls._construct(
            id=id,
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=created_at,
        )

    def change_password(self, password_hash: str) -> "User":
        """Replace the stored credential."""
        return self.model_copy(update={"password_hash": password_hash})

    def promote_to_admin(self) -> "User":
        """Grant the admin role."""
        return self.model_copy(update={"role": UserRole.ADMIN})

    def is_admin(self) -> bool:
        return self.role.is_admin()
