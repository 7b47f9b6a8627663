"""Get user posts use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pinbook.config import PaginationSettings
from pinbook.domain.service import PostService, UserService, normalize_page
from pinbook.domain.value import PostSortOrder, UserName

from ..post.common import PostPageResponse, to_page_response


class GetUserPostsRequest(BaseModel):
    """Get user posts request."""

    name: str = Field(min_length=1, max_length=255)
    page: str | int | None = None
    sort: str | None = None


class UserSummary(BaseModel):
    """Public user profile shown above their posts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    total_score: int


class GetUserPostsResponse(PostPageResponse):
    """A user's profile and one page of their posts."""

    user: UserSummary


class GetUserPostsUseCase:
    """Use case for paging through the posts of one user."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize get user posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            pagination_settings: Page size
        """
        self.post_service = post_service
        self.user_service = user_service
        self.page_size = pagination_settings.page_size

    async def execute(self, request: GetUserPostsRequest) -> GetUserPostsResponse:
        """Execute get user posts flow.

        Raises:
            NotFoundError: If no user has that name
        """
        page_number = normalize_page(request.page)
        sort = PostSortOrder.parse(request.sort)

        with logfire.span(
            "get_user_posts.execute",
            name=request.name,
            page=page_number,
            sort=sort.value,
        ):
            user = await self.user_service.get_by_name(UserName(request.name))

            page = await self.post_service.find_page(
                page=page_number,
                page_size=self.page_size,
                sort=sort,
                author_id=user.id,
            )
            listing = await to_page_response(page, self.user_service)

            return GetUserPostsResponse(
                **dict(listing),
                user=UserSummary(
                    id=str(user.id), name=user.name.root, total_score=user.total_score
                ),
            )
