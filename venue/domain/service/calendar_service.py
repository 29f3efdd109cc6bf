"""Calendar domain service.

Bridges approved bookings to the external calendar. The HTTP details live in
``venue.adapter.google_calendar``; this module holds the client interface
and the mapping of remote entries into month-view entries.
"""

from datetime import date, datetime, timedelta, tzinfo

import logfire

from venue.domain.error import CalendarRemoteError
from venue.domain.model import Booking, CalendarEntry, RemoteCalendarEvent

from .base import Service


class CalendarClient:
    """External calendar client interface.

    Implementations raise the ``CalendarError`` family from
    ``venue.domain.error`` on failure.
    """

    async def create_event(self, booking: Booking, access_token: str | None) -> str:
        """Create a calendar event covering the booking's time window.

        Args:
            booking: Booking whose echoed event details are mirrored
            access_token: Bearer credential with calendar write scope

        Returns:
            The external calendar event id

        Raises:
            CalendarConfigMissingError: If no calendar id is configured
            CalendarAuthMissingError: If no credential was supplied
            CalendarRemoteError: If the calendar rejected the request
        """
        raise NotImplementedError

    async def delete_event(
        self, calendar_event_id: str, access_token: str | None
    ) -> bool:
        """Delete a calendar event, best effort.

        Returns:
            True if the calendar confirmed the deletion, False otherwise.
            Never raises.
        """
        raise NotImplementedError

    async def list_events(
        self, time_min: datetime, time_max: datetime, access_token: str | None
    ) -> list[RemoteCalendarEvent]:
        """List single (expanded) events in a window, ordered by start.

        Falls back to the configured API key when ``access_token`` is None.

        Raises:
            CalendarConfigMissingError: If no calendar id is configured
            CalendarAuthMissingError: If neither token nor API key is available
            CalendarRemoteError: If the calendar rejected the request
        """
        raise NotImplementedError


def month_window(year: int, month: int, tz: tzinfo) -> tuple[datetime, datetime]:
    """First instant and last millisecond of a calendar month.

    Args:
        year: Four-digit year
        month: Month 1-12
        tz: Zone the month is reckoned in

    Returns:
        Tuple of (month_start, month_end)
    """
    start = datetime(year, month, 1, tzinfo=tz)
    if month == 12:
        next_month = datetime(year + 1, 1, 1, tzinfo=tz)
    else:
        next_month = datetime(year, month + 1, 1, tzinfo=tz)
    return start, next_month - timedelta(milliseconds=1)


def _parse_boundary(boundary: dict[str, str]) -> tuple[datetime | None, bool]:
    """Parse a remote start/end into (datetime, all_day).

    Raises:
        CalendarRemoteError: If the remote timestamp is malformed
    """
    try:
        if boundary.get("dateTime"):
            return datetime.fromisoformat(boundary["dateTime"]), False
        if boundary.get("date"):
            day = date.fromisoformat(boundary["date"])
            return datetime(day.year, day.month, day.day), True
    except (TypeError, ValueError) as e:
        raise CalendarRemoteError(f"Malformed calendar timestamp: {boundary}") from e
    return None, False


class CalendarService(Service):
    """Domain service for calendar mirroring and month listing."""

    def __init__(self, calendar_client: CalendarClient) -> None:
        """Initialize calendar service.

        Args:
            calendar_client: External calendar client
        """
        self.calendar_client = calendar_client

    async def create_for_booking(
        self, booking: Booking, access_token: str | None
    ) -> str:
        """Mirror an approved booking into the calendar.

        Callers check the event's stored calendar id first; this method
        always creates a new remote event.

        Returns:
            The external calendar event id

        Raises:
            CalendarError: If the calendar call fails
        """
        with logfire.span(
            "calendar_service.create_for_booking",
            booking_id=str(booking.id),
            event_id=booking.event_id,
        ):
            calendar_event_id = await self.calendar_client.create_event(
                booking, access_token
            )
            logfire.info(
                "Calendar event created",
                booking_id=str(booking.id),
                calendar_event_id=calendar_event_id,
            )
            return calendar_event_id

    async def remove(self, calendar_event_id: str, access_token: str | None) -> bool:
        """Delete a calendar event, best effort.

        Returns:
            True if deleted, False if the calendar call failed
        """
        with logfire.span(
            "calendar_service.remove", calendar_event_id=calendar_event_id
        ):
            deleted = await self.calendar_client.delete_event(
                calendar_event_id, access_token
            )
            if not deleted:
                logfire.warn(
                    "Calendar event not deleted", calendar_event_id=calendar_event_id
                )
            return deleted

    async def list_entries(
        self,
        month_start: datetime,
        month_end: datetime,
        owned_ids: set[str],
        access_token: str | None,
    ) -> list[CalendarEntry]:
        """List calendar entries in a window, marking those we created.

        Args:
            month_start: Window start
            month_end: Window end
            owned_ids: Calendar event ids attached to booked events
            access_token: Optional bearer credential

        Returns:
            Entries in calendar order with ``is_admin`` set for owned ids

        Raises:
            CalendarError: If the listing fails
        """
        with logfire.span(
            "calendar_service.list_entries",
            month_start=month_start.isoformat(),
            month_end=month_end.isoformat(),
        ):
            remote_events = await self.calendar_client.list_events(
                month_start, month_end, access_token
            )

            entries = []
            for remote in remote_events:
                start, all_day = _parse_boundary(remote.start)
                end, _ = _parse_boundary(remote.end)
                entries.append(
                    CalendarEntry(
                        id=remote.id,
                        title=remote.summary or "Untitled Event",
                        start=start,
                        end=end,
                        all_day=all_day,
                        is_admin=remote.id in owned_ids,
                    )
                )

            logfire.info(
                "Calendar entries listed",
                count=len(entries),
                admin_count=sum(1 for e in entries if e.is_admin),
            )
            return entries
