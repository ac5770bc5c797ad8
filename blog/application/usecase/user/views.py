"""Plain-data projections of users."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model.user import User


class UserView(BaseModel):
    """User as returned to callers. Never carries the password hash."""

    user_id: str
    email: str
    role: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            user_id=str(user.id),
            email=user.email.value,
            role=user.role.value,
            created_at=user.created_at.value,
        )
