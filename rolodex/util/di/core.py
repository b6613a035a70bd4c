"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from rolodex.config import HistorySettings, Settings, StorageSettings
from rolodex.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide storage settings."""
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_history_settings(self, settings: Settings) -> HistorySettings:
        """Provide history settings."""
        return settings.history
