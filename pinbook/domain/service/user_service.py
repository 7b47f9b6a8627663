"""User domain service."""

from typing import Sequence

import logfire

from pinbook.domain.error import NotFoundError
from pinbook.domain.model import Author, User
from pinbook.domain.repository import UserRepository
from pinbook.domain.value import PostId, UserId, UserName

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_name(self, name: UserName) -> User:
        """Get user by public name.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_name", name=name.root):
            user = await self.user_repository.find_by_name(name)
            if not user:
                logfire.warn("User not found", name=name.root)
                raise NotFoundError("User", name.root)
            return user

    async def get_authors(self, user_ids: Sequence[UserId]) -> dict[UserId, Author]:
        """Resolve author projections for a batch of user IDs.

        Args:
            user_ids: Author IDs (duplicates allowed)

        Returns:
            Mapping of user ID to author; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: Author(id=user.id, name=user.name.root) for user in users}

    async def adjust_total_score(self, user_id: UserId, delta: int) -> bool:
        """Atomically add ``delta`` to a user's total score.

        Args:
            user_id: User ID
            delta: Signed amount

        Returns:
            True if the user existed and was updated
        """
        with logfire.span(
            "user_service.adjust_total_score", user_id=str(user_id), delta=delta
        ):
            updated = await self.user_repository.increment_total_score(user_id, delta)
            if updated:
                logfire.info("User total score adjusted", user_id=str(user_id))
            else:
                logfire.warn("Total score update matched no user", user_id=str(user_id))
            return updated

    async def record_vote(self, user_id: UserId, post_id: PostId) -> bool:
        """Add a post to the user's vote set if it is not already there.

        Returns:
            True if recorded, False if the user already voted on the post
        """
        with logfire.span(
            "user_service.record_vote", user_id=str(user_id), post_id=str(post_id)
        ):
            return await self.user_repository.add_vote(user_id, post_id)

    async def save(self, user: User) -> User:
        """Save a user."""
        with logfire.span("user_service.save", user_id=str(user.id)):
            return await self.user_repository.save(user)
