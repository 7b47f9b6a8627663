"""In-memory user repository for testing."""

from typing import Optional, Sequence

from pinbook.domain.model.user import User
from pinbook.domain.repository.user import UserRepository
from pinbook.domain.value import PostId, UserId, UserName


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_name(self, name: UserName) -> Optional[User]:
        """Find a user by their name."""
        for user in self._users.values():
            if user.name == name:
                return user
        return None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[i] for i in set(user_ids) if i in self._users]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def increment_total_score(self, user_id: UserId, delta: int) -> bool:
        """Atomically add ``delta`` to the user's total score."""
        user = self._users.get(user_id)
        if user is None:
            return False
        self._users[user_id] = user.model_copy(
            update={"total_score": user.total_score + delta}
        )
        return True

    async def add_vote(self, user_id: UserId, post_id: PostId) -> bool:
        """Add ``post_id`` to the user's votes if absent."""
        user = self._users.get(user_id)
        if user is None or post_id in user.votes:
            return False
        self._users[user_id] = user.model_copy(
            update={"votes": user.votes | {post_id}}
        )
        return True
