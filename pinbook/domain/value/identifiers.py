"""Strongly typed identifiers for Pinbook domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID, uuid4

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)


def new_post_id() -> PostId:
    """Generate a fresh post identifier.

    The same identifier names the post's image asset, so the asset and the
    post that references it are bound one to one.
    """
    return PostId(uuid4())
