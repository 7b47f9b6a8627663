"""Domain services."""

from .base import Service
from .image_service import AssetStore, ImageFetcher, ImageService
from .jwt_service import JWTService
from .pagination import normalize_page, plan_page
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AssetStore",
    "ImageFetcher",
    "ImageService",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
    "normalize_page",
    "plan_page",
]
