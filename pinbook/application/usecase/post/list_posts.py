"""List posts use case (the feed)."""

import logfire
from pydantic import BaseModel

from pinbook.config import PaginationSettings
from pinbook.domain.service import PostService, UserService, normalize_page
from pinbook.domain.value import PostSortOrder

from .common import PostPageResponse, to_page_response


class ListPostsRequest(BaseModel):
    """List posts request.

    Both fields are taken as the client sent them; bad values fall back to
    the first page and newest-first ordering.
    """

    page: str | int | None = None
    sort: str | None = None


class ListPostsUseCase:
    """Use case for paging through all posts."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service (author lookup)
            pagination_settings: Page size
        """
        self.post_service = post_service
        self.user_service = user_service
        self.page_size = pagination_settings.page_size

    async def execute(self, request: ListPostsRequest) -> PostPageResponse:
        """Execute list posts flow.

        Args:
            request: Raw page number and sort key

        Returns:
            The requested page of posts with their authors
        """
        page_number = normalize_page(request.page)
        sort = PostSortOrder.parse(request.sort)

        with logfire.span("list_posts.execute", page=page_number, sort=sort.value):
            page = await self.post_service.find_page(
                page=page_number, page_size=self.page_size, sort=sort
            )
            return await to_page_response(page, self.user_service)
