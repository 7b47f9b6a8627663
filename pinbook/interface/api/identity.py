"""Request identity resolution."""

from fastapi import HTTPException, status

from pinbook.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from pinbook.domain.error import NotFoundError
from pinbook.util.jwt import JWTError


async def require_user(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse:
    """Resolve the ``auth_token`` cookie to a user or reject the request.

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired or
            names a user that no longer exists
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
