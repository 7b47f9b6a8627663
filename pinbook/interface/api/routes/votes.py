"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from pinbook.application.usecase.auth import GetCurrentUserUseCase
from pinbook.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from pinbook.domain.error import DomainError
from pinbook.domain.value import VoteDirection
from pinbook.interface.api.identity import require_user
from pinbook.interface.error import to_http_exception

router = APIRouter(prefix="/api/auth", tags=["votes"], route_class=DishkaRoute)


async def _cast(
    post_id: UUID,
    direction: VoteDirection,
    cast_vote_use_case: CastVoteUseCase,
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
) -> CastVoteResponse:
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                post_id=str(post_id), voter_id=user.user_id, direction=direction
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.put("/upvote/{post_id}", response_model=CastVoteResponse)
async def upvote_post(
    post_id: UUID,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Add one point to a post.

    Requires authentication. Each user votes at most once per post and
    never on their own posts.

    Raises:
        HTTPException: 401 unauthenticated, 400 own post, 404 unknown post,
            409 already voted
    """
    return await _cast(
        post_id,
        VoteDirection.UP,
        cast_vote_use_case,
        get_current_user_use_case,
        auth_token,
    )


@router.put("/downvote/{post_id}", response_model=CastVoteResponse)
async def downvote_post(
    post_id: UUID,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Take one point from a post. Same rules as upvoting."""
    return await _cast(
        post_id,
        VoteDirection.DOWN,
        cast_vote_use_case,
        get_current_user_use_case,
        auth_token,
    )
