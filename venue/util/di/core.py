"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from venue.config import CalendarSettings, Settings
from venue.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_calendar_settings(self, settings: Settings) -> CalendarSettings:
        """Provide calendar settings."""
        return settings.calendar
