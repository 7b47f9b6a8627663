"""Vote domain service.

Applying a vote touches three records: the post's score, the author's total
score and the voter's vote set. The vote set insert is the atomic
check-and-record that rules out double voting, so it runs first; the two
score increments follow as storage-level atomic increments.
"""

import logfire

from pinbook.domain.error import (
    AlreadyVotedError,
    NotFoundError,
    PartialVoteFailureError,
    SelfVoteError,
)
from pinbook.domain.model.vote import Vote
from pinbook.domain.value import PostId, UserId, VoteDirection

from .base import Service
from .post_service import PostService
from .user_service import UserService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize vote service.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def upvote(self, post_id: PostId, voter_id: UserId) -> Vote:
        """Add one point to a post."""
        return await self.apply_vote(voter_id, post_id, VoteDirection.UP)

    async def downvote(self, post_id: PostId, voter_id: UserId) -> Vote:
        """Take one point from a post."""
        return await self.apply_vote(voter_id, post_id, VoteDirection.DOWN)

    async def apply_vote(
        self, voter_id: UserId, post_id: PostId, direction: VoteDirection
    ) -> Vote:
        """Apply a single signed vote.

        Args:
            voter_id: Voting user
            post_id: Post voted on
            direction: UP (+1) or DOWN (-1)

        Returns:
            The applied vote

        Raises:
            NotFoundError: Post or voter does not exist
            SelfVoteError: Voter is the post's author
            AlreadyVotedError: Voter already voted on this post
            PartialVoteFailureError: The vote was recorded but a score update
                failed; needs reconciliation
        """
        vote = Vote(voter_id=voter_id, post_id=post_id, direction=direction)

        with logfire.span(
            "vote_service.apply_vote",
            post_id=str(post_id),
            voter_id=str(voter_id),
            delta=vote.delta,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                logfire.warn("Vote on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if post.author_id == voter_id:
                logfire.warn(
                    "Self vote rejected", post_id=str(post_id), voter_id=str(voter_id)
                )
                raise SelfVoteError(str(voter_id), str(post_id))

            voter = await self.user_service.get_by_id(voter_id)
            if voter.has_voted(post_id):
                logfire.warn(
                    "Duplicate vote attempt",
                    post_id=str(post_id),
                    voter_id=str(voter_id),
                )
                raise AlreadyVotedError(str(voter_id), str(post_id))

            # Set-insert-if-absent: the snapshot above may be stale
            if not await self.user_service.record_vote(voter_id, post_id):
                logfire.warn(
                    "Concurrent duplicate vote rejected",
                    post_id=str(post_id),
                    voter_id=str(voter_id),
                )
                raise AlreadyVotedError(str(voter_id), str(post_id))

            applied = ["voter_votes"]
            await self._apply_step(
                vote,
                applied,
                "post_score",
                self.post_service.increment_score(post_id, vote.delta),
            )
            await self._apply_step(
                vote,
                applied,
                "author_total_score",
                self.user_service.adjust_total_score(post.author_id, vote.delta),
            )

            logfire.info(
                "Vote applied",
                post_id=str(post_id),
                voter_id=str(voter_id),
                delta=vote.delta,
            )
            return vote

    async def _apply_step(self, vote: Vote, applied: list[str], step: str, update):
        """Await one score update, turning any failure into a partial failure."""
        try:
            updated = await update
        except Exception as e:
            self._report_partial(vote, applied, step, str(e))
            raise PartialVoteFailureError(
                str(vote.voter_id), str(vote.post_id), list(applied), step, str(e)
            ) from e

        if not updated:
            reason = "record no longer exists"
            self._report_partial(vote, applied, step, reason)
            raise PartialVoteFailureError(
                str(vote.voter_id), str(vote.post_id), list(applied), step, reason
            )
        applied.append(step)

    @staticmethod
    def _report_partial(
        vote: Vote, applied: list[str], failed_step: str, reason: str
    ) -> None:
        logfire.error(
            "Vote partially applied, needs reconciliation",
            post_id=str(vote.post_id),
            voter_id=str(vote.voter_id),
            delta=vote.delta,
            applied=applied,
            failed_step=failed_step,
            reason=reason,
        )
