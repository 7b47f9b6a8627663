"""Application layer DI providers."""

from dishka import Scope, provide

from pinbook.application.usecase.auth import GetCurrentUserUseCase
from pinbook.application.usecase.post import (
    DeletePostUseCase,
    ListPostsUseCase,
    SearchPostsUseCase,
    SubmitPostUseCase,
)
from pinbook.application.usecase.user import GetUserPostsUseCase
from pinbook.application.usecase.vote import CastVoteUseCase
from pinbook.config import PaginationSettings
from pinbook.domain.service import (
    ImageService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from pinbook.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_post_use_case(
        self,
        image_service: ImageService,
        post_service: PostService,
        user_service: UserService,
    ) -> SubmitPostUseCase:
        """Provide submit post use case."""
        return SubmitPostUseCase(
            image_service=image_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        image_service: ImageService,
        post_service: PostService,
        user_service: UserService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            image_service=image_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> GetUserPostsUseCase:
        """Provide get user posts use case."""
        return GetUserPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, post_service: PostService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, post_service=post_service)
