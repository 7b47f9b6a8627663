"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pinbook.domain.model.user import User
from pinbook.domain.value import PostId, UserId, UserName


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: UserName) -> Optional[User]:
        """Find a user by their public name.

        Args:
            name: The user's name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up; unknown IDs are skipped

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def increment_total_score(self, user_id: UserId, delta: int) -> bool:
        """Atomically add ``delta`` to the user's total score.

        Args:
            user_id: The user's unique identifier
            delta: Signed amount to add

        Returns:
            True if the user existed and was updated
        """
        pass

    @abstractmethod
    async def add_vote(self, user_id: UserId, post_id: PostId) -> bool:
        """Atomically record a vote in the user's vote set.

        Set-insert-if-absent: the post is added only if it is not already a
        member. Two concurrent calls for the same user and post can never
        both succeed.

        Args:
            user_id: The voter
            post_id: The post voted on

        Returns:
            True if the post was added, False if it was already present
            or the user does not exist
        """
        pass
