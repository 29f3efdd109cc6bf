"""In-memory event repository for testing."""

from datetime import datetime
from typing import Optional

from venue.domain.error import EventAlreadyExistsError, PersistenceError
from venue.domain.model import Event
from venue.domain.repository import EventRepository
from venue.domain.value import BookingId, EventId, EventStatus, PerformerId


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        return self._events.get(event_id)

    async def find_all(self, status: Optional[EventStatus] = None) -> list[Event]:
        """List events in date and start time order."""
        events = [
            event
            for event in self._events.values()
            if status is None or event.status == status
        ]
        return sorted(events, key=lambda e: (e.date, e.start_time))

    async def list_calendar_event_ids(self) -> set[str]:
        """Calendar event ids attached to any event."""
        return {
            event.calendar_event_id
            for event in self._events.values()
            if event.calendar_event_id
        }

    async def create(self, event: Event) -> Event:
        """Insert a new event.

        Raises:
            EventAlreadyExistsError: If the key is taken
        """
        if event.id in self._events:
            raise EventAlreadyExistsError(event.id)
        self._events[event.id] = event
        return event

    async def save(self, event: Event) -> Event:
        """Overwrite an existing event."""
        if event.id not in self._events:
            raise PersistenceError(f"Event {event.id} no longer exists")
        self._events[event.id] = event
        return event

    async def mark_booked(
        self,
        event_id: EventId,
        performer_id: PerformerId,
        booking_id: BookingId,
        booked_at: datetime,
    ) -> Event:
        """Set status booked and bind the performer and booking."""
        event = self._events.get(event_id)
        if not event:
            raise PersistenceError(f"Event {event_id} no longer exists")
        booked = event.model_copy(
            update={
                "status": EventStatus.BOOKED,
                "booked_performer_id": performer_id,
                "booked_booking_id": booking_id,
                "booked_at": booked_at,
            }
        )
        self._events[event_id] = booked
        return booked

    async def set_calendar_event_id(
        self, event_id: EventId, calendar_event_id: str
    ) -> bool:
        """Attach a calendar event id unless one is already set."""
        event = self._events.get(event_id)
        if not event or event.calendar_event_id:
            return False
        self._events[event_id] = event.model_copy(
            update={"calendar_event_id": calendar_event_id}
        )
        return True

    async def delete(self, event_id: EventId) -> bool:
        """Delete an event."""
        return self._events.pop(event_id, None) is not None
