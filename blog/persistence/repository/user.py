"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import EmailAddress, UserId
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == str(user_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by normalized email address."""
        stmt = select(users_table).where(users_table.c.email == email.value)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_all(self) -> list[User]:
        """Find all users, oldest first."""
        stmt = select(users_table).order_by(users_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        with logfire.span("user_repository.save", user_id=str(user.id)):
            user_dict = user_to_dict(user)

            existing = await self.session.execute(
                select(users_table.c.id).where(users_table.c.id == str(user.id))
            )
            if existing.first():
                stmt = (
                    update(users_table)
                    .where(users_table.c.id == str(user.id))
                    .values(**user_dict)
                )
            else:
                stmt = insert(users_table).values(**user_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return user

    async def delete(self, user: User) -> None:
        """Delete a user."""
        stmt = delete(users_table).where(users_table.c.id == str(user.id))
        await self.session.execute(stmt)
        await self.session.flush()
