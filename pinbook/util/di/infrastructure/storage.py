"""Asset storage providers."""

from dishka import Scope, provide

from pinbook.adapter.storage.local import LocalAssetStore
from pinbook.config import UploadSettings
from pinbook.domain.service import AssetStore
from pinbook.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Asset storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage in the configured uploads directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_asset_store(self, upload_settings: UploadSettings) -> AssetStore:
        """Provide uploads directory asset store."""
        return LocalAssetStore(upload_settings.directory)
