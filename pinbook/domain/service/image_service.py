"""Image ingestion domain service.

Turns a user-supplied image URL into a thumbnail stored in the uploads
directory under a freshly generated, collision-free name.
"""

import asyncio
import posixpath
from abc import ABC, abstractmethod
from urllib.parse import urlsplit

import logfire

from pinbook.adapter.imaging.thumbnail import ThumbnailError, render_thumbnail
from pinbook.config import UploadSettings
from pinbook.domain.error import (
    DecodeFailedError,
    StorageFailedError,
    UnsupportedFormatError,
)
from pinbook.domain.value import ImageFormat, PostId, new_post_id

from .base import Service


class ImageFetcher(ABC):
    """Outbound image download interface."""

    @abstractmethod
    async def fetch(self, url: str) -> bytes:
        """Download the body at ``url`` in a single attempt.

        Raises:
            FetchFailedError: On any network or HTTP failure
        """
        pass


class AssetStore(ABC):
    """Named binary assets in the uploads directory."""

    @abstractmethod
    async def write(self, name: str, data: bytes) -> None:
        """Store ``data`` under ``name``.

        The asset becomes visible only once fully written; a failed write
        leaves nothing behind.

        Raises:
            OSError: If the write fails
        """
        pass

    @abstractmethod
    async def remove(self, name: str) -> bool:
        """Delete the asset.

        Returns:
            True if removed, False if it was already absent

        Raises:
            OSError: If the asset exists but cannot be removed
            ValueError: If the name is not a plain file name
        """
        pass

    @abstractmethod
    async def exists(self, name: str) -> bool:
        pass


class ImageService(Service):
    """Domain service for fetching, resizing and storing post images."""

    def __init__(
        self,
        image_fetcher: ImageFetcher,
        asset_store: AssetStore,
        upload_settings: UploadSettings,
    ) -> None:
        """Initialize image service.

        Args:
            image_fetcher: Outbound HTTP fetcher
            asset_store: Uploads directory store
            upload_settings: Thumbnail bounds
        """
        self.image_fetcher = image_fetcher
        self.asset_store = asset_store
        self.max_size = (upload_settings.max_width, upload_settings.max_height)

    @staticmethod
    def resolve_format(source_url: str) -> ImageFormat:
        """Pick the image format from the URL path's extension.

        Query string and fragment are ignored. Matching is exact, so only
        ``.jpg`` and ``.png`` are accepted.

        Raises:
            UnsupportedFormatError: For any other extension
        """
        extension = posixpath.splitext(urlsplit(source_url).path)[1]
        image_format = ImageFormat.from_extension(extension)
        if image_format is None:
            raise UnsupportedFormatError(source_url, extension)
        return image_format

    async def ingest(self, source_url: str, asset_id: PostId | None = None) -> str:
        """Fetch, thumbnail and store a remote image.

        The format check happens before any network work, so unsupported
        URLs never trigger a download or a write.

        Args:
            source_url: Remote image URL ending in .jpg or .png
            asset_id: Identifier to name the asset after (a new one if None)

        Returns:
            Filename of the stored asset, ``<id hex><extension>``

        Raises:
            UnsupportedFormatError: Extension is not .jpg or .png
            FetchFailedError: Download failed
            DecodeFailedError: Bytes are not a valid image of that format
            StorageFailedError: Thumbnail could not be written
        """
        with logfire.span("image_service.ingest", source_url=source_url):
            try:
                image_format = self.resolve_format(source_url)
            except UnsupportedFormatError as e:
                logfire.warn(
                    "Rejected image with unsupported extension",
                    source_url=source_url,
                    extension=e.extension,
                )
                raise

            data = await self.image_fetcher.fetch(source_url)

            try:
                thumbnail = await asyncio.to_thread(
                    render_thumbnail, data, image_format.pillow_format, self.max_size
                )
            except ThumbnailError as e:
                logfire.warn(
                    "Image decode failed", source_url=source_url, error=str(e)
                )
                raise DecodeFailedError(source_url, str(e)) from e

            filename = f"{(asset_id or new_post_id()).hex}{image_format.extension}"

            try:
                await self.asset_store.write(filename, thumbnail)
            except OSError as e:
                logfire.error(
                    "Asset write failed",
                    source_url=source_url,
                    filename=filename,
                    error=str(e),
                )
                raise StorageFailedError(source_url, filename, str(e)) from e

            logfire.info(
                "Image ingested",
                source_url=source_url,
                filename=filename,
                size=len(thumbnail),
            )
            return filename

    async def remove_asset(self, filename: str) -> None:
        """Delete a stored asset; an already missing file counts as removed.

        Raises:
            StorageFailedError: If the file exists but cannot be deleted
        """
        with logfire.span("image_service.remove_asset", filename=filename):
            try:
                removed = await self.asset_store.remove(filename)
            except (OSError, ValueError) as e:
                logfire.error("Asset removal failed", filename=filename, error=str(e))
                raise StorageFailedError(None, filename, str(e)) from e

            if removed:
                logfire.info("Asset removed", filename=filename)
            else:
                logfire.info("Asset already absent", filename=filename)
