"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from pinbook.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from pinbook.domain.error import AlreadyVotedError, NotFoundError, SelfVoteError
from pinbook.domain.repository import PostRepository, UserRepository
from pinbook.domain.value import VoteDirection
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    author = await user_repo.save(make_user("author", total_score=1))
    voter = await user_repo.save(make_user("voter"))
    post = await post_repo.save(make_post(author.id))
    return author, voter, post


class TestCastVote:
    """Tests for casting votes."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "direction,expected_score", [(VoteDirection.UP, 2), (VoteDirection.DOWN, 0)]
    )
    async def test_vote_returns_new_score(self, unit_env, direction, expected_score):
        use_case = await unit_env.get(CastVoteUseCase)
        _, voter, post = await _seed(unit_env)

        response = await use_case.execute(
            CastVoteRequest(
                post_id=str(post.id), voter_id=str(voter.id), direction=direction
            )
        )

        assert response.post_id == str(post.id)
        assert response.delta == direction.delta
        assert response.score == expected_score

    @pytest.mark.asyncio
    async def test_direction_accepts_raw_value(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        _, voter, post = await _seed(unit_env)

        response = await use_case.execute(
            CastVoteRequest(post_id=str(post.id), voter_id=str(voter.id), direction=-1)
        )

        assert response.delta == -1

    @pytest.mark.asyncio
    async def test_rejections(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        author, voter, post = await _seed(unit_env)

        with pytest.raises(SelfVoteError):
            await use_case.execute(
                CastVoteRequest(
                    post_id=str(post.id),
                    voter_id=str(author.id),
                    direction=VoteDirection.UP,
                )
            )

        request = CastVoteRequest(
            post_id=str(post.id), voter_id=str(voter.id), direction=VoteDirection.UP
        )
        await use_case.execute(request)
        with pytest.raises(AlreadyVotedError):
            await use_case.execute(request)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    post_id=str(uuid4()),
                    voter_id=str(voter.id),
                    direction=VoteDirection.DOWN,
                )
            )
