"""Mock calendar providers for testing."""

from dishka import Scope, provide

from venue.adapter.google_calendar import (
    GoogleCalendarClient,
    MockGoogleCalendarClient,
)
from venue.config import CalendarSettings
from venue.util.di.infrastructure.calendar import CalendarProvider


class MockCalendarProvider(CalendarProvider):
    """Mock calendar provider using the in-memory calendar.

    Uses REQUEST scope so each test starts with an empty calendar.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_google_calendar_client(
        self, calendar_settings: CalendarSettings
    ) -> GoogleCalendarClient:
        """Provide mock Google Calendar client."""
        return MockGoogleCalendarClient(time_zone=calendar_settings.time_zone)
