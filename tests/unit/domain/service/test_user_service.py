"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from pinbook.domain.error import NotFoundError
from pinbook.domain.repository import UserRepository
from pinbook.domain.service import UserService
from pinbook.domain.value import PostId, UserId, UserName
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLookup:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_by_name(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user("alice"))

        found = await user_service.get_by_name(UserName("alice"))

        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_get_by_name_is_exact(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.save(make_user("alice"))

        with pytest.raises(NotFoundError):
            await user_service.get_by_name(UserName("Alice"))

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_authors_skips_unknown_and_duplicates(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await user_service.save(make_user("alice"))
        bob = await user_service.save(make_user("bob"))
        ghost = UserId(uuid4())

        authors = await user_service.get_authors([alice.id, bob.id, alice.id, ghost])

        assert set(authors) == {alice.id, bob.id}
        assert authors[bob.id].name == "bob"

    @pytest.mark.asyncio
    async def test_get_authors_empty(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_authors([]) == {}


class TestScoreAndVotes:
    """Tests for adjust_total_score and record_vote."""

    @pytest.mark.asyncio
    async def test_adjust_total_score(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user("alice", total_score=3))

        assert await user_service.adjust_total_score(user.id, -5) is True
        assert (await user_service.get_by_id(user.id)).total_score == -2

    @pytest.mark.asyncio
    async def test_adjust_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.adjust_total_score(UserId(uuid4()), 1) is False

    @pytest.mark.asyncio
    async def test_record_vote_once(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_service.save(make_user("alice"))
        post_id = PostId(uuid4())

        assert await user_service.record_vote(user.id, post_id) is True
        assert await user_service.record_vote(user.id, post_id) is False
        assert (await user_repo.find_by_id(user.id)).votes == frozenset({post_id})
