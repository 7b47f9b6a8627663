"""Outbound image download over HTTP."""

import httpx
import logfire

from pinbook.domain.error import FetchFailedError
from pinbook.domain.service.image_service import ImageFetcher


class HttpxImageFetcher(ImageFetcher):
    """Downloads images with httpx, one attempt per call.

    Each call opens its own client and response, both closed on every exit
    path. The body is streamed so oversized downloads are cut off early.
    """

    def __init__(
        self,
        timeout: float,
        max_bytes: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout: Per-request timeout in seconds
            max_bytes: Largest body accepted
            transport: httpx transport override (default network transport)
        """
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.transport = transport

    async def fetch(self, url: str) -> bytes:
        """Download ``url``.

        Raises:
            FetchFailedError: On network errors, HTTP error statuses or an
                oversized body
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    if response.is_error:
                        raise FetchFailedError(url, f"HTTP {response.status_code}")

                    chunks: list[bytes] = []
                    received = 0
                    async for chunk in response.aiter_bytes():
                        received += len(chunk)
                        if received > self.max_bytes:
                            raise FetchFailedError(
                                url, f"body larger than {self.max_bytes} bytes"
                            )
                        chunks.append(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logfire.warn("Image fetch failed", url=url, error=str(e))
            raise FetchFailedError(url, str(e) or type(e).__name__) from e

        logfire.debug("Image fetched", url=url, size=received)
        return b"".join(chunks)


class MockImageFetcher(ImageFetcher):
    """Serves registered bytes instead of touching the network.

    Unknown URLs fail the way an unreachable host would.
    """

    def __init__(self) -> None:
        self.responses: dict[str, bytes] = {}
        self.requested: list[str] = []

    def register(self, url: str, data: bytes) -> None:
        self.responses[url] = data

    async def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        try:
            return self.responses[url]
        except KeyError:
            raise FetchFailedError(url, "connection refused") from None
