"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from pinbook.application.usecase.auth import GetCurrentUserUseCase
from pinbook.application.usecase.post import (
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostPageResponse,
    SearchPostsRequest,
    SearchPostsUseCase,
    SubmitPostRequest,
    SubmitPostResponse,
    SubmitPostUseCase,
)
from pinbook.domain.error import DomainError
from pinbook.interface.api.identity import require_user
from pinbook.interface.error import to_http_exception

router = APIRouter(prefix="/api", tags=["posts"], route_class=DishkaRoute)


class SubmitPostAPIRequest(BaseModel):
    """API request for submitting a post."""

    title: str = Field(min_length=1, max_length=300)
    url: str = Field(min_length=1)
    comment: str = Field(default="", max_length=10000)


@router.get("/posts/", response_model=PostPageResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: str | None = None,
    sort: str | None = None,
) -> PostPageResponse:
    """List all posts, newest first unless ``sort=score``.

    ``page`` is 1-based; missing or invalid values mean the first page.
    """
    try:
        return await list_posts_use_case.execute(ListPostsRequest(page=page, sort=sort))
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/search/", response_model=PostPageResponse)
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    q: str = "",
    page: str | None = None,
    sort: str | None = None,
) -> PostPageResponse:
    """Find posts whose title or url contains ``q`` (case-insensitive)."""
    try:
        return await search_posts_use_case.execute(
            SearchPostsRequest(query=q, page=page, sort=sort)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post(
    "/auth/submit/",
    response_model=SubmitPostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_post(
    request: SubmitPostAPIRequest,
    submit_post_use_case: FromDishka[SubmitPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SubmitPostResponse:
    """Share an image link.

    Requires authentication. The image at ``url`` (a .jpg or .png) is
    downloaded once and stored as a thumbnail served under /uploads/.

    Args:
        request: Post data
        submit_post_use_case: Submit post use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created post

    Raises:
        HTTPException: 401 without a valid token, 400 for an unusable image
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await submit_post_use_case.execute(
            SubmitPostRequest(
                title=request.title,
                url=request.url,
                comment=request.comment,
                author_id=user.user_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.delete("/auth/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete one of your own posts together with its image.

    Raises:
        HTTPException: 401 without a valid token, 403 for someone else's
            post, 404 if the post does not exist
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user_id=user.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e) from e
