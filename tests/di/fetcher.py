"""Mock image fetcher providers for testing."""

from dishka import Scope, provide

from pinbook.adapter.http.fetcher import MockImageFetcher
from pinbook.domain.service import ImageFetcher
from pinbook.util.di.infrastructure.fetcher import FetcherProvider


class MockFetcherProvider(FetcherProvider):
    """Serves canned image bytes registered by the test."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_image_fetcher(self) -> ImageFetcher:
        """Provide mock image fetcher."""
        return MockImageFetcher()
