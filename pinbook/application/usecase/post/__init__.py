"""Post use cases."""

from .common import AuthorInfo, PostItem, PostPageResponse
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .search_posts import SearchPostsRequest, SearchPostsUseCase
from .submit_post import SubmitPostRequest, SubmitPostResponse, SubmitPostUseCase

__all__ = [
    "AuthorInfo",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostItem",
    "PostPageResponse",
    "SearchPostsRequest",
    "SearchPostsUseCase",
    "SubmitPostRequest",
    "SubmitPostResponse",
    "SubmitPostUseCase",
]
