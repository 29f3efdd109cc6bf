"""Event repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from venue.domain.model.event import Event
from venue.domain.value import BookingId, EventId, EventStatus, PerformerId


class EventRepository(ABC):
    """Repository for Event entity.

    Defines the contract for event persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Event | None:
        """Find an event by its derived key.

        Args:
            event_id: The event key (``{date}_{HHMM}``)

        Returns:
            The event if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, status: EventStatus | None = None) -> list[Event]:
        """List events, optionally filtered by status, oldest first."""
        pass

    @abstractmethod
    async def list_calendar_event_ids(self) -> set[str]:
        """Return every calendar event id already attached to an event."""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Insert a new event.

        Raises:
            EventAlreadyExistsError: If an event with the same key exists
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Overwrite an existing event.

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def mark_booked(
        self,
        event_id: EventId,
        performer_id: PerformerId,
        booking_id: BookingId,
        booked_at: datetime,
    ) -> Event:
        """Transition an event to booked and bind the performer.

        Raises:
            PersistenceError: If the write fails or the event is gone
        """
        pass

    @abstractmethod
    async def set_calendar_event_id(
        self, event_id: EventId, calendar_event_id: str
    ) -> bool:
        """Attach a calendar event id if none is set yet.

        Returns:
            True if the id was written, False if the event already had one

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def delete(self, event_id: EventId) -> bool:
        """Delete an event.

        Returns:
            True if an event was deleted, False if none existed
        """
        pass
