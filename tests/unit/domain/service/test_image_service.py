"""Unit tests for ImageService."""

from io import BytesIO
from uuid import uuid4

import pytest
from PIL import Image

from pinbook.adapter.http.fetcher import MockImageFetcher
from pinbook.config import UploadSettings
from pinbook.domain.error import (
    DecodeFailedError,
    ErrorKind,
    FetchFailedError,
    StorageFailedError,
    UnsupportedFormatError,
)
from pinbook.domain.service import AssetStore, ImageFetcher, ImageService
from pinbook.domain.value import ImageFormat, PostId
from tests.conftest import make_image
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolveFormat:
    """Tests for resolve_format."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com/cat.jpg", ImageFormat.JPEG),
            ("https://example.com/cat.png", ImageFormat.PNG),
            ("https://example.com/cat.png?size=large#top", ImageFormat.PNG),
            ("https://example.com/a.b/cat.jpg", ImageFormat.JPEG),
        ],
    )
    def test_supported(self, url, expected):
        assert ImageService.resolve_format(url) is expected

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/cat.gif",
            "https://example.com/cat.jpeg",
            "https://example.com/cat.JPG",
            "https://example.com/cat",
            "https://example.com/cat.jpg/",
        ],
    )
    def test_unsupported(self, url):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ImageService.resolve_format(url)

        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_FORMAT


class TestIngest:
    """Tests for ingest."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fmt,ext", [("JPEG", ".jpg"), ("PNG", ".png")])
    async def test_stores_bounded_thumbnail(self, unit_env, fmt, ext):
        """A large image is stored shrunk to fit the configured bounds."""
        service = await unit_env.get(ImageService)
        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)
        store = await unit_env.get(AssetStore)

        url = f"https://example.com/photo{ext}"
        fetcher.register(url, make_image(fmt, size=(1500, 1000)))

        filename = await service.ingest(url)

        assert filename.endswith(ext)
        data = (store.directory / filename).read_bytes()
        with Image.open(BytesIO(data)) as image:
            assert image.format == fmt
            assert image.size[0] <= 300
            assert image.size[1] <= 500

    @pytest.mark.asyncio
    async def test_filename_is_asset_id_hex(self, unit_env):
        service = await unit_env.get(ImageService)
        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)

        asset_id = PostId(uuid4())
        fetcher.register("https://example.com/a.png", make_image("PNG"))

        filename = await service.ingest("https://example.com/a.png", asset_id=asset_id)

        assert filename == f"{asset_id.hex}.png"

    @pytest.mark.asyncio
    async def test_query_string_is_ignored_for_format(self, unit_env):
        service = await unit_env.get(ImageService)
        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)

        url = "https://example.com/a.jpg?w=800"
        fetcher.register(url, make_image("JPEG"))

        assert (await service.ingest(url)).endswith(".jpg")

    @pytest.mark.asyncio
    async def test_unsupported_extension_never_fetches_or_writes(self, unit_env):
        service = await unit_env.get(ImageService)
        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)
        store = await unit_env.get(AssetStore)

        with pytest.raises(UnsupportedFormatError):
            await service.ingest("https://example.com/anim.gif")

        assert fetcher.requested == []
        assert not store.directory.exists() or not any(store.directory.iterdir())

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self, unit_env):
        service = await unit_env.get(ImageService)

        with pytest.raises(FetchFailedError):
            await service.ingest("https://unreachable.example.com/a.png")

    @pytest.mark.asyncio
    async def test_corrupt_bytes_raise_decode_failed(self, unit_env):
        service = await unit_env.get(ImageService)
        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)
        store = await unit_env.get(AssetStore)

        fetcher.register("https://example.com/broken.png", b"<html>not found</html>")

        with pytest.raises(DecodeFailedError) as exc_info:
            await service.ingest("https://example.com/broken.png")

        assert exc_info.value.source_url == "https://example.com/broken.png"
        assert not store.directory.exists() or not any(store.directory.iterdir())

    @pytest.mark.asyncio
    async def test_extension_decides_format_not_content(self, unit_env):
        """A PNG body behind a .jpg URL is rejected."""
        service = await unit_env.get(ImageService)
        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)

        fetcher.register("https://example.com/liar.jpg", make_image("PNG"))

        with pytest.raises(DecodeFailedError):
            await service.ingest("https://example.com/liar.jpg")

    @pytest.mark.asyncio
    async def test_write_failure_raises_storage_failed(self, unit_env):
        class FailingStore(AssetStore):
            async def write(self, name, data):
                raise OSError("disk full")

            async def remove(self, name):
                return False

            async def exists(self, name):
                return False

        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)
        upload_settings = await unit_env.get(UploadSettings)
        service = ImageService(fetcher, FailingStore(), upload_settings)
        fetcher.register("https://example.com/a.png", make_image("PNG"))

        with pytest.raises(StorageFailedError, match="disk full") as exc_info:
            await service.ingest("https://example.com/a.png")

        assert exc_info.value.kind is ErrorKind.STORAGE_FAILED


class TestRemoveAsset:
    """Tests for remove_asset."""

    @pytest.mark.asyncio
    async def test_remove_is_idempotent(self, unit_env):
        service = await unit_env.get(ImageService)
        fetcher: MockImageFetcher = await unit_env.get(ImageFetcher)
        store = await unit_env.get(AssetStore)

        fetcher.register("https://example.com/a.png", make_image("PNG"))
        filename = await service.ingest("https://example.com/a.png")

        await service.remove_asset(filename)
        await service.remove_asset(filename)

        assert not await store.exists(filename)

    @pytest.mark.asyncio
    async def test_invalid_name_raises_storage_failed(self, unit_env):
        service = await unit_env.get(ImageService)

        with pytest.raises(StorageFailedError):
            await service.remove_asset("../outside.png")

