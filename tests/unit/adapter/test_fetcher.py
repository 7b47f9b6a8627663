"""Unit tests for the httpx image fetcher."""

import httpx
import pytest

from pinbook.adapter.http.fetcher import HttpxImageFetcher, MockImageFetcher
from pinbook.domain.error import ErrorKind, FetchFailedError


def _fetcher(handler, max_bytes: int = 1024) -> HttpxImageFetcher:
    return HttpxImageFetcher(
        timeout=1.0, max_bytes=max_bytes, transport=httpx.MockTransport(handler)
    )


class TestHttpxImageFetcher:
    """Tests for HttpxImageFetcher."""

    @pytest.mark.asyncio
    async def test_returns_body(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, content=b"image"))

        assert await fetcher.fetch("https://example.com/a.png") == b"image"

    @pytest.mark.asyncio
    async def test_follows_redirects(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old.png":
                return httpx.Response(
                    301, headers={"Location": "https://example.com/new.png"}
                )
            return httpx.Response(200, content=b"moved")

        fetcher = _fetcher(handler)

        assert await fetcher.fetch("https://example.com/old.png") == b"moved"

    @pytest.mark.asyncio
    async def test_error_status_fails(self):
        fetcher = _fetcher(lambda request: httpx.Response(404))

        with pytest.raises(FetchFailedError, match="HTTP 404") as exc_info:
            await fetcher.fetch("https://example.com/missing.png")

        assert exc_info.value.kind is ErrorKind.FETCH_FAILED

    @pytest.mark.asyncio
    async def test_network_error_fails(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = _fetcher(handler)

        with pytest.raises(FetchFailedError, match="connection refused"):
            await fetcher.fetch("https://unreachable.example.com/a.jpg")

    @pytest.mark.asyncio
    async def test_oversized_body_fails(self):
        fetcher = _fetcher(
            lambda request: httpx.Response(200, content=b"x" * 2048), max_bytes=1024
        )

        with pytest.raises(FetchFailedError, match="larger than 1024 bytes"):
            await fetcher.fetch("https://example.com/huge.png")


class TestMockImageFetcher:
    """Tests for MockImageFetcher."""

    @pytest.mark.asyncio
    async def test_registered_url(self):
        fetcher = MockImageFetcher()
        fetcher.register("https://example.com/a.png", b"data")

        assert await fetcher.fetch("https://example.com/a.png") == b"data"
        assert fetcher.requested == ["https://example.com/a.png"]

    @pytest.mark.asyncio
    async def test_unknown_url_fails(self):
        fetcher = MockImageFetcher()

        with pytest.raises(FetchFailedError):
            await fetcher.fetch("https://example.com/unknown.png")
