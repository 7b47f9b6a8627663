"""Unit tests for PostService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from pinbook.domain.error import InvalidPageError
from pinbook.domain.repository import PostRepository
from pinbook.domain.service import PostService
from pinbook.domain.value import PostId, PostSortOrder, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_posts(unit_env, count: int, author_id: UserId | None = None):
    """Save ``count`` posts, the last one being the newest."""
    post_repo = await unit_env.get(PostRepository)
    author_id = author_id or UserId(uuid4())
    posts = []
    for i in range(count):
        post = make_post(author_id, title=f"Post {i}", age=timedelta(minutes=count - i))
        posts.append(await post_repo.save(post))
    return posts


class TestFindPage:
    """Tests for find_page."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        posts = await _seed_posts(unit_env, 3)

        page = await post_service.find_page(page=1, page_size=6)

        assert [p.id for p in page.items] == [p.id for p in reversed(posts)]
        assert page.total == 3
        assert page.is_first is True

    @pytest.mark.asyncio
    async def test_second_page_window(self, unit_env):
        post_service = await unit_env.get(PostService)
        posts = await _seed_posts(unit_env, 13)

        page = await post_service.find_page(page=2, page_size=6)

        newest_first = list(reversed(posts))
        assert [p.id for p in page.items] == [p.id for p in newest_first[6:12]]
        assert page.page == 2
        assert page.is_first is False
        assert page.is_last is True

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, unit_env):
        post_service = await unit_env.get(PostService)
        await _seed_posts(unit_env, 2)

        page = await post_service.find_page(page=5, page_size=6)

        assert page.items == []
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_sort_by_score(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        low = await post_repo.save(make_post(author_id, score=-2))
        high = await post_repo.save(make_post(author_id, score=7, age=timedelta(days=3)))
        mid = await post_repo.save(make_post(author_id, score=1))

        page = await post_service.find_page(
            page=1, page_size=6, sort=PostSortOrder.SCORE
        )

        assert [p.id for p in page.items] == [high.id, mid.id, low.id]

    @pytest.mark.asyncio
    async def test_search_matches_title_or_url_case_insensitively(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        by_title = await post_repo.save(make_post(author_id, title="Sunset at SEA"))
        by_url = await post_repo.save(
            make_post(author_id, title="Beach", url="https://seaside.example/b.png")
        )
        await post_repo.save(make_post(author_id, title="Mountains"))

        page = await post_service.find_page(page=1, page_size=6, search="sea")

        assert {p.id for p in page.items} == {by_title.id, by_url.id}
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_author_filter(self, unit_env):
        post_service = await unit_env.get(PostService)
        mine = await _seed_posts(unit_env, 2)
        await _seed_posts(unit_env, 3)

        page = await post_service.find_page(
            page=1, page_size=6, author_id=mine[0].author_id
        )

        assert {p.id for p in page.items} == {p.id for p in mine}
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_invalid_page_size(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidPageError):
            await post_service.find_page(page=1, page_size=0)


class TestScoreAndDelete:
    """Tests for increment_score and delete_post."""

    @pytest.mark.asyncio
    async def test_increment_score(self, unit_env):
        post_service = await unit_env.get(PostService)
        (post,) = await _seed_posts(unit_env, 1)

        assert await post_service.increment_score(post.id, -1) is True
        assert (await post_service.get_post_by_id(post.id)).score == 0

    @pytest.mark.asyncio
    async def test_increment_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.increment_score(PostId(uuid4()), 1) is False

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        (post,) = await _seed_posts(unit_env, 1)

        assert await post_service.delete_post(post.id) == post.score
        assert await post_service.delete_post(post.id) is None
        assert await post_service.get_post_by_id(post.id) is None
