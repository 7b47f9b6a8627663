"""User routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Path

from pinbook.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from pinbook.application.usecase.user import (
    GetUserPostsRequest,
    GetUserPostsResponse,
    GetUserPostsUseCase,
)
from pinbook.domain.error import DomainError
from pinbook.interface.api.identity import require_user
from pinbook.interface.error import to_http_exception

router = APIRouter(prefix="/api", tags=["users"], route_class=DishkaRoute)


@router.get("/user/{name}", response_model=GetUserPostsResponse)
async def get_user_posts(
    name: Annotated[str, Path(min_length=1, max_length=255)],
    get_user_posts_use_case: FromDishka[GetUserPostsUseCase],
    page: str | None = None,
    sort: str | None = None,
) -> GetUserPostsResponse:
    """A user's profile and their posts, paged like the feed.

    Raises:
        HTTPException: 404 if no user has that name
    """
    try:
        return await get_user_posts_use_case.execute(
            GetUserPostsRequest(name=name, page=page, sort=sort)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/auth/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """The authenticated user, including the posts they have voted on."""
    return await require_user(auth_token, get_current_user_use_case)
