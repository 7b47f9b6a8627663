"""Cast vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pinbook.domain.service import PostService, VoteService
from pinbook.domain.value import PostId, UserId, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str
    voter_id: str  # User ID from authenticated user
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    post_id: str
    delta: int
    score: int | None  # Post score after the vote, None if it vanished since


class CastVoteUseCase:
    """Use case for upvoting or downvoting a post."""

    def __init__(self, vote_service: VoteService, post_service: PostService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            post_service: Post domain service (score read-back)
        """
        self.vote_service = vote_service
        self.post_service = post_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Returns:
            The applied delta and the post's resulting score

        Raises:
            NotFoundError: Post or voter does not exist
            SelfVoteError: Voter authored the post
            AlreadyVotedError: Voter already voted on the post
            PartialVoteFailureError: Vote recorded but a score update failed
        """
        post_id = PostId(UUID(request.post_id))
        voter_id = UserId(UUID(request.voter_id))

        if request.direction is VoteDirection.UP:
            vote = await self.vote_service.upvote(post_id, voter_id)
        else:
            vote = await self.vote_service.downvote(post_id, voter_id)

        post = await self.post_service.get_post_by_id(post_id)
        logfire.info(
            "Vote cast",
            post_id=str(post_id),
            delta=vote.delta,
            score=post.score if post else None,
        )

        return CastVoteResponse(
            post_id=str(post_id),
            delta=vote.delta,
            score=post.score if post else None,
        )
