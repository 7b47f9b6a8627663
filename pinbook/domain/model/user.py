"""User aggregate root.

Identity fields are owned by the external account service; Pinbook only
maintains the score aggregate and the vote history.
"""

from typing import Optional

from pydantic import Field

from pinbook.domain.model.common import DomainModel
from pinbook.domain.value import PostId, UserId, UserName


class User(DomainModel):
    """User aggregate root.

    ``total_score`` is the sum of the scores of the user's posts.
    ``votes`` is the set of posts the user has voted on and is the
    authoritative record against double voting.
    """

    id: UserId
    name: UserName
    email: Optional[str] = None
    total_score: int = 0
    votes: frozenset[PostId] = Field(default_factory=frozenset)

    def has_voted(self, post_id: PostId) -> bool:
        return post_id in self.votes
