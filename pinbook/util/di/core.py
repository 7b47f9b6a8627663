"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from pinbook.config import AuthSettings, PaginationSettings, Settings, UploadSettings
from pinbook.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the per-concern sections derived from them.

    ``Settings`` itself is container context: whoever builds the container
    decides where it comes from (usually the environment), so the app and
    its dependencies always see the same instance.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        """Thumbnail bounds, fetch limits and the uploads directory."""
        return settings.uploads

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination
