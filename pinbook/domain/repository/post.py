"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pinbook.domain.model.post import Post
from pinbook.domain.value import PostId, PostSortOrder, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.CREATED,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 6,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest or highest scoring first.

        Args:
            sort: Descending sort key
            author_id: Only posts by this author (None for all authors)
            search: Case-insensitive substring matched against title or url
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count posts matching the same filters as ``find_all``."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> Optional[int]:
        """Remove a post.

        Args:
            post_id: The post ID to delete

        Returns:
            The score the post held when it was removed, or None if none existed
        """
        pass

    @abstractmethod
    async def increment_score(self, post_id: PostId, delta: int) -> bool:
        """Atomically add ``delta`` to the post's score.

        Uses a storage-level increment so concurrent votes never lose an update.

        Args:
            post_id: The post ID
            delta: Signed amount to add

        Returns:
            True if the post existed and was updated
        """
        pass
