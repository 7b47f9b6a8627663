"""Post aggregate root.

A post is a submitted link with a locally stored thumbnail image and a
running score adjusted by votes.
"""

from datetime import datetime, timezone

from pydantic import Field

from pinbook.domain.model.common import DomainModel
from pinbook.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Everything except ``score`` is fixed at creation. ``score`` starts at 1
    (the submitter's implicit upvote) and only changes through votes.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    url: str
    comment: str = Field(default="", max_length=10000)
    image: str  # Asset filename in the uploads directory
    score: int = 1
    author_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Author(DomainModel):
    """Public projection of a post's author."""

    id: UserId
    name: str
