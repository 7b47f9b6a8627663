"""Get current user use case."""

from pydantic import BaseModel

from pinbook.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    name: str
    email: str | None
    total_score: int
    votes: list[str]


class GetCurrentUserUseCase:
    """Use case for resolving the identity behind a request's token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token

        Args:
            request: Request with JWT token

        Returns:
            The authenticated user

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        user_id = self.jwt_service.resolve_user_id(request.token)
        user = await self.user_service.get_by_id(user_id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            name=user.name.root,
            email=user.email,
            total_score=user.total_score,
            votes=sorted(str(post_id) for post_id in user.votes),
        )
