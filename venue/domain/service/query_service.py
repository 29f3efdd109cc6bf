"""Query domain service.

Read-only views over events, bookings and the external calendar.
"""

from datetime import datetime

import logfire

from venue.domain.model import Booking, CalendarEntry, Event
from venue.domain.repository import BookingRepository, EventRepository
from venue.domain.value import BookingStatus, EventStatus, ListKind

from .base import Service
from .calendar_service import CalendarService


class QueryService(Service):
    """Domain service for status listings and the calendar month view."""

    def __init__(
        self,
        event_repository: EventRepository,
        booking_repository: BookingRepository,
        calendar_service: CalendarService,
    ) -> None:
        """Initialize query service.

        Args:
            event_repository: Event repository
            booking_repository: Booking repository
            calendar_service: Calendar domain service
        """
        self.event_repository = event_repository
        self.booking_repository = booking_repository
        self.calendar_service = calendar_service

    async def list_by_status(
        self, kind: ListKind, status: str | None = None
    ) -> list[Event] | list[Booking]:
        """List events or bookings filtered by status.

        Args:
            kind: Which collection to read
            status: Status value valid for that collection, or None for all

        Returns:
            Matching entities, oldest first

        Raises:
            ValueError: If the status is not valid for the collection
        """
        with logfire.span("query_service.list_by_status", kind=kind.value, status=status):
            if kind == ListKind.EVENTS:
                event_status = EventStatus(status) if status else None
                return await self.event_repository.find_all(event_status)

            booking_status = BookingStatus(status) if status else None
            return await self.booking_repository.find_all(booking_status)

    async def list_calendar_window(
        self,
        month_start: datetime,
        month_end: datetime,
        access_token: str | None = None,
    ) -> list[CalendarEntry]:
        """List calendar entries in a window, split by origin.

        Entries whose id is attached to one of our events are marked
        ``is_admin``; everything else was added in the calendar directly.

        Raises:
            CalendarError: If the calendar cannot be read
        """
        with logfire.span(
            "query_service.list_calendar_window",
            month_start=month_start.isoformat(),
        ):
            owned_ids = await self.event_repository.list_calendar_event_ids()
            return await self.calendar_service.list_entries(
                month_start, month_end, owned_ids, access_token
            )
