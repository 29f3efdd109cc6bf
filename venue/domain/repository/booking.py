"""Booking repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from venue.domain.model.booking import Booking
from venue.domain.model.event import Event
from venue.domain.value import BookingId, BookingStatus, EventId


class BookingRepository(ABC):
    """Repository for Booking entity."""

    @abstractmethod
    async def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """Find a booking by ID."""
        pass

    @abstractmethod
    async def find_all(self, status: BookingStatus | None = None) -> list[Booking]:
        """List bookings, optionally filtered by status, oldest first."""
        pass

    @abstractmethod
    async def find_by_event(
        self, event_id: EventId, status: BookingStatus | None = None
    ) -> list[Booking]:
        """Find bookings for an event, optionally filtered by status."""
        pass

    @abstractmethod
    async def create(self, booking: Booking) -> Booking:
        """Insert a new booking.

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def mark_approved(
        self, booking_id: BookingId, approved_at: datetime
    ) -> Booking:
        """Set a booking's status to approved.

        Raises:
            PersistenceError: If the write fails or the booking is gone
        """
        pass

    @abstractmethod
    async def move_to_event(self, old_event_id: EventId, event: Event) -> int:
        """Re-point an event's bookings at a rescheduled event.

        The echoed title, date and time window are refreshed from ``event``.

        Returns:
            Number of bookings moved

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def delete(self, booking_id: BookingId) -> bool:
        """Delete a booking.

        Returns:
            True if a booking was deleted, False if none existed

        Raises:
            PersistenceError: If the write fails
        """
        pass
