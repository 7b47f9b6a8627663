"""In-memory post repository for testing."""

from typing import Optional

from pinbook.domain.model.post import Post
from pinbook.domain.repository.post import PostRepository
from pinbook.domain.value import PostId, PostSortOrder, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Mutations read and replace a snapshot without awaiting in between, so
    each one is atomic with respect to other coroutines on the loop.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _matching(
        self, author_id: Optional[UserId], search: Optional[str]
    ) -> list[Post]:
        posts = list(self._posts.values())

        if author_id is not None:
            posts = [p for p in posts if p.author_id == author_id]

        if search:
            needle = search.casefold()
            posts = [
                p
                for p in posts
                if needle in p.title.casefold() or needle in p.url.casefold()
            ]

        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.CREATED,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 6,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        posts = self._matching(author_id, search)

        if sort == PostSortOrder.SCORE:
            posts.sort(key=lambda p: (p.score, p.id), reverse=True)
        else:
            posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)

        return posts[offset : offset + limit]

    async def count(
        self,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._matching(author_id, search))

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> Optional[int]:
        """Delete a post, returning the score it held."""
        post = self._posts.pop(post_id, None)
        return post.score if post else None

    async def increment_score(self, post_id: PostId, delta: int) -> bool:
        """Atomically add ``delta`` to the post's score."""
        post = self._posts.get(post_id)
        if post is None:
            return False
        self._posts[post_id] = post.model_copy(update={"score": post.score + delta})
        return True
