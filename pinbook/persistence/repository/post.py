"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinbook.domain.model import Post
from pinbook.domain.repository.post import PostRepository
from pinbook.domain.value import PostId, PostSortOrder, UserId
from pinbook.persistence.mappers import post_to_dict, row_to_post
from pinbook.persistence.tables import posts_table


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(self, stmt, author_id: Optional[UserId], search: Optional[str]):
        if author_id is not None:
            stmt = stmt.where(posts_table.c.author_id == author_id)
        if search:
            pattern = f"%{_escape_like(search)}%"
            stmt = stmt.where(
                or_(
                    posts_table.c.title.ilike(pattern, escape="\\"),
                    posts_table.c.url.ilike(pattern, escape="\\"),
                )
            )
        return stmt

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_post(row._asdict())

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.CREATED,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 6,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            author_id=str(author_id) if author_id else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(posts_table), author_id, search)

            # Sort order; id breaks ties so windows never overlap
            if sort == PostSortOrder.SCORE:
                stmt = stmt.order_by(desc(posts_table.c.score), desc(posts_table.c.id))
            else:
                stmt = stmt.order_by(
                    desc(posts_table.c.created_at), desc(posts_table.c.id)
                )

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count posts matching the given filters."""
        with logfire.span(
            "post_repository.count",
            author_id=str(author_id) if author_id else None,
            search=search,
        ):
            stmt = self._filtered(
                select(func.count()).select_from(posts_table), author_id, search
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), title=post.title
        ):
            stmt = posts_table.insert().values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> Optional[int]:
        """Delete a post (hard delete), returning the score it held."""
        stmt = (
            posts_table.delete()
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.score)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def increment_score(self, post_id: PostId, delta: int) -> bool:
        """Atomically add ``delta`` to the post's score."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(score=posts_table.c.score + delta)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
