"""Outbound image fetch providers."""

from dishka import Scope, provide

from pinbook.adapter.http.fetcher import HttpxImageFetcher
from pinbook.config import UploadSettings
from pinbook.domain.service import ImageFetcher
from pinbook.util.di.base import ProviderBase


class FetcherProvider(ProviderBase):
    """Image fetcher component base."""

    __mock_component__ = "fetcher"


class ProdFetcherProvider(FetcherProvider):
    """Production fetcher downloading over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_fetcher(self, upload_settings: UploadSettings) -> ImageFetcher:
        """Provide httpx image fetcher."""
        return HttpxImageFetcher(
            timeout=upload_settings.fetch_timeout,
            max_bytes=upload_settings.max_download_bytes,
        )
