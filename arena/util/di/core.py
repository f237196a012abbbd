"""Settings providers."""

from dishka import Scope, provide

from arena.config import AuthSettings, RegistrySettings, Settings
from arena.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads ``Settings`` once per container and exposes its sections."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_registry_settings(self, settings: Settings) -> RegistrySettings:
        return settings.registry
