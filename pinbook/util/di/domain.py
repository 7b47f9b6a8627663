"""Domain layer DI providers."""

from dishka import Scope, provide

from pinbook.config import AuthSettings, UploadSettings
from pinbook.domain.repository import PostRepository, UserRepository
from pinbook.domain.service import (
    AssetStore,
    ImageFetcher,
    ImageService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from pinbook.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_vote_service(
        self, post_service: PostService, user_service: UserService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(post_service=post_service, user_service=user_service)

    @provide
    def get_image_service(
        self,
        image_fetcher: ImageFetcher,
        asset_store: AssetStore,
        upload_settings: UploadSettings,
    ) -> ImageService:
        """Provide image ingestion domain service."""
        return ImageService(
            image_fetcher=image_fetcher,
            asset_store=asset_store,
            upload_settings=upload_settings,
        )
