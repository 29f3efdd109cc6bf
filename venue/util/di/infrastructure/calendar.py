"""Google Calendar infrastructure providers."""

from dishka import Scope, provide

from venue.adapter.google_calendar import (
    GoogleCalendarClient,
    RealGoogleCalendarClient,
)
from venue.config import CalendarSettings
from venue.util.di.base import ProviderBase


class CalendarProvider(ProviderBase):
    """Calendar component base."""

    __mock_component__ = "calendar"


class ProdCalendarProvider(CalendarProvider):
    """Production Google Calendar provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_calendar_client(
        self, calendar_settings: CalendarSettings
    ) -> GoogleCalendarClient:
        """Provide Google Calendar client.

        A missing calendar id is not fatal here: listing and approval report
        it as a config error at call time.
        """
        return RealGoogleCalendarClient(
            calendar_id=calendar_settings.calendar_id,
            time_zone=calendar_settings.time_zone,
            api_key=calendar_settings.api_key,
            api_base_url=calendar_settings.api_base_url,
            timeout_seconds=calendar_settings.timeout_seconds,
        )
