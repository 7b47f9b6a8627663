"""Post domain service."""

from typing import Optional

import logfire

from pinbook.domain.model import Page
from pinbook.domain.model.post import Post
from pinbook.domain.repository import PostRepository
from pinbook.domain.value import PostId, PostSortOrder, UserId

from .base import Service
from .pagination import plan_page


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a new post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def delete_post(self, post_id: PostId) -> Optional[int]:
        """Remove a post record.

        Returns:
            The score the post held at removal, or None if it did not exist
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            score = await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted", post_id=str(post_id), deleted=score is not None
            )
            return score

    async def increment_score(self, post_id: PostId, delta: int) -> bool:
        """Atomically add ``delta`` to a post's score.

        Args:
            post_id: Post ID
            delta: Signed amount

        Returns:
            True if the post existed and was updated
        """
        with logfire.span(
            "post_service.increment_score", post_id=str(post_id), delta=delta
        ):
            updated = await self.post_repository.increment_score(post_id, delta)
            if updated:
                logfire.info("Post score adjusted", post_id=str(post_id), delta=delta)
            else:
                logfire.warn("Score update matched no post", post_id=str(post_id))
            return updated

    async def find_page(
        self,
        page: int,
        page_size: int,
        sort: PostSortOrder = PostSortOrder.CREATED,
        author_id: UserId | None = None,
        search: str | None = None,
    ) -> Page[Post]:
        """Fetch one page of posts.

        Args:
            page: 1-based page number, already normalised
            page_size: Posts per page
            sort: Descending sort key
            author_id: Restrict to one author
            search: Case-insensitive substring of title or url

        Returns:
            Posts in the window together with total count and boundary flags

        Raises:
            InvalidPageError: If page or page_size is below 1
        """
        with logfire.span(
            "post_service.find_page",
            page=page,
            sort=sort.value,
            author_id=str(author_id) if author_id else None,
            search=search,
        ):
            total = await self.post_repository.count(
                author_id=author_id, search=search
            )
            window = plan_page(page, total, page_size)

            posts = await self.post_repository.find_all(
                sort=sort,
                author_id=author_id,
                search=search,
                limit=window.limit,
                offset=window.skip,
            )

            logfire.info("Posts listed", count=len(posts), total=total)

            return Page[Post](
                items=posts,
                total=total,
                page=window.page,
                is_first=window.is_first,
                is_last=window.is_last,
                skip=window.skip,
            )
