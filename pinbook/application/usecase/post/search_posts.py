"""Search posts use case."""

import logfire
from pydantic import BaseModel

from pinbook.config import PaginationSettings
from pinbook.domain.service import PostService, UserService, normalize_page
from pinbook.domain.value import PostSortOrder

from .common import PostPageResponse, to_page_response


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    query: str = ""
    page: str | int | None = None
    sort: str | None = None


class SearchPostsUseCase:
    """Use case for finding posts whose title or url contains a term."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.page_size = pagination_settings.page_size

    async def execute(self, request: SearchPostsRequest) -> PostPageResponse:
        """Execute search flow.

        The term is matched case-insensitively as a plain substring; a blank
        term matches every post.
        """
        term = request.query.strip() or None
        page_number = normalize_page(request.page)
        sort = PostSortOrder.parse(request.sort)

        with logfire.span(
            "search_posts.execute", query=term, page=page_number, sort=sort.value
        ):
            page = await self.post_service.find_page(
                page=page_number, page_size=self.page_size, sort=sort, search=term
            )
            return await to_page_response(page, self.user_service)
