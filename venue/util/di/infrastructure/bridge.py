"""Calendar bridge provider exposing the Google client to the domain."""

from dishka import Scope, provide

from venue.adapter.google_calendar import GoogleCalendarClient
from venue.domain.service import CalendarClient
from venue.util.di.base import ProviderBase


class CalendarBridgeProvider(ProviderBase):
    """Provider binding the domain calendar interface to the Google client."""

    scope = Scope.REQUEST

    @provide(scope=Scope.REQUEST)
    def get_calendar_client(
        self, google_calendar_client: GoogleCalendarClient
    ) -> CalendarClient:
        """Provide the calendar client used by domain services.

        Args:
            google_calendar_client: Google Calendar client (real or mock)

        Returns:
            The same client, typed as the domain interface
        """
        return google_calendar_client
