"""Vote intent.

Votes are not persisted as entities: applying one changes the post score,
the author's total score and the voter's vote set.
"""

from pinbook.domain.model.common import DomainModel
from pinbook.domain.value import PostId, UserId, VoteDirection


class Vote(DomainModel):
    """A user's signed vote on a post."""

    voter_id: UserId
    post_id: PostId
    direction: VoteDirection

    @property
    def delta(self) -> int:
        return self.direction.delta
