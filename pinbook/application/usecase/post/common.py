"""Response models shared by the post listing use cases."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pinbook.domain.model import Author, Page, Post
from pinbook.domain.service import UserService


class AuthorInfo(BaseModel):
    """Public author projection embedded in post items."""

    id: str
    name: str


class PostItem(BaseModel):
    """Post as returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    url: str
    comment: str
    image: str
    score: int
    created_at: datetime
    author: AuthorInfo | None  # None if the author account is gone


class PostPageResponse(BaseModel):
    """One page of posts with window flags (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    posts: list[PostItem]
    total: int
    page: int
    is_first: bool
    is_last: bool


def to_post_item(post: Post, author: Author | None) -> PostItem:
    return PostItem(
        id=str(post.id),
        title=post.title,
        url=post.url,
        comment=post.comment,
        image=post.image,
        score=post.score,
        created_at=post.created_at,
        author=AuthorInfo(id=str(author.id), name=author.name) if author else None,
    )


async def to_page_response(
    page: Page[Post], user_service: UserService
) -> PostPageResponse:
    """Attach authors to a page of posts.

    Authors are loaded in one batch query for the whole page.
    """
    authors = await user_service.get_authors([post.author_id for post in page.items])
    return PostPageResponse(
        posts=[to_post_item(post, authors.get(post.author_id)) for post in page.items],
        total=page.total,
        page=page.page,
        is_first=page.is_first,
        is_last=page.is_last,
    )
