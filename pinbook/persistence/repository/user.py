"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import any_, func, literal, not_, select
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from pinbook.domain.model import User
from pinbook.domain.repository import UserRepository
from pinbook.domain.value import PostId, UserId, UserName
from pinbook.persistence.mappers import row_to_user, user_to_dict
from pinbook.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_name(self, name: UserName) -> Optional[User]:
        """Find a user by their name.

        Args:
            name: Name to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(set(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def increment_total_score(self, user_id: UserId, delta: int) -> bool:
        """Atomically add ``delta`` to the user's total score.

        Args:
            user_id: User ID to update
            delta: Signed amount to add

        Returns:
            True if the user row was updated
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(total_score=users_table.c.total_score + delta)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def add_vote(self, user_id: UserId, post_id: PostId) -> bool:
        """Append ``post_id`` to the user's votes unless already present.

        The membership test and the append run in a single UPDATE, so the
        row lock taken by Postgres makes the check-and-record atomic.
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .where(not_(literal(post_id, UUID) == any_(users_table.c.votes)))
            .values(
                votes=func.array_append(users_table.c.votes, literal(post_id, UUID))
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        added = result.rowcount > 0
        logfire.debug(
            "Vote set insert",
            user_id=str(user_id),
            post_id=str(post_id),
            added=added,
        )
        return added
