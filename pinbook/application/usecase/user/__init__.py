"""User use cases."""

from .get_user_posts import (
    GetUserPostsRequest,
    GetUserPostsResponse,
    GetUserPostsUseCase,
    UserSummary,
)

__all__ = [
    "GetUserPostsRequest",
    "GetUserPostsResponse",
    "GetUserPostsUseCase",
    "UserSummary",
]
