"""Domain value objects for Pinbook."""

from pinbook.domain.value.identifiers import PostId, UserId, new_post_id
from pinbook.domain.value.types import (
    ImageFormat,
    PostSortOrder,
    UserName,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "new_post_id",
    # Types
    "ImageFormat",
    "PostSortOrder",
    "UserName",
    "VoteDirection",
]
