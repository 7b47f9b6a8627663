"""Unit tests for the in-memory repositories used by the test container."""

from datetime import timedelta
from uuid import uuid4

import pytest

from pinbook.domain.value import PostId, PostSortOrder, UserId, UserName
from pinbook.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_post, make_user


class TestInMemoryPostRepository:
    """Ordering and filtering match the Postgres repository."""

    @pytest.mark.asyncio
    async def test_ties_broken_by_id(self):
        repo = InMemoryPostRepository()
        author_id = UserId(uuid4())
        posts = [await repo.save(make_post(author_id, score=3)) for _ in range(4)]

        found = await repo.find_all(sort=PostSortOrder.SCORE)

        assert [p.id for p in found] == sorted((p.id for p in posts), reverse=True)

    @pytest.mark.asyncio
    async def test_limit_and_offset(self):
        repo = InMemoryPostRepository()
        author_id = UserId(uuid4())
        for i in range(5):
            await repo.save(make_post(author_id, title=f"p{i}", age=timedelta(days=i)))

        found = await repo.find_all(limit=2, offset=1)

        assert [p.title for p in found] == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_increment_score_replaces_snapshot(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post(UserId(uuid4())))

        assert await repo.increment_score(post.id, 4)

        assert post.score == 1
        assert (await repo.find_by_id(post.id)).score == 5
        assert not await repo.increment_score(PostId(uuid4()), 1)


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_find_by_name_and_ids(self):
        repo = InMemoryUserRepository()
        alice = await repo.save(make_user("alice"))
        bob = await repo.save(make_user("bob"))

        assert (await repo.find_by_name(UserName("bob"))).id == bob.id
        assert await repo.find_by_name(UserName("carol")) is None
        found = await repo.find_by_ids([alice.id, UserId(uuid4())])
        assert [u.id for u in found] == [alice.id]

    @pytest.mark.asyncio
    async def test_add_vote_is_insert_if_absent(self):
        repo = InMemoryUserRepository()
        user = await repo.save(make_user("alice"))
        post_id = PostId(uuid4())

        assert await repo.add_vote(user.id, post_id) is True
        assert await repo.add_vote(user.id, post_id) is False
        assert await repo.add_vote(UserId(uuid4()), post_id) is False
        assert (await repo.find_by_id(user.id)).has_voted(post_id)
