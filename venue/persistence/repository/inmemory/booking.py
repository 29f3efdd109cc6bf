"""In-memory booking repository for testing."""

from datetime import datetime
from typing import Optional

from venue.domain.error import PersistenceError
from venue.domain.model import Booking, Event
from venue.domain.repository import BookingRepository
from venue.domain.value import BookingId, BookingStatus, EventId


class InMemoryBookingRepository(BookingRepository):
    """In-memory implementation of BookingRepository for testing."""

    def __init__(self) -> None:
        self._bookings: dict[BookingId, Booking] = {}

    async def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """Find a booking by ID."""
        return self._bookings.get(booking_id)

    async def find_all(self, status: Optional[BookingStatus] = None) -> list[Booking]:
        """List bookings, oldest first."""
        bookings = [
            booking
            for booking in self._bookings.values()
            if status is None or booking.status == status
        ]
        return sorted(bookings, key=lambda b: b.created_at)

    async def find_by_event(
        self, event_id: EventId, status: Optional[BookingStatus] = None
    ) -> list[Booking]:
        """List bookings for one event, oldest first."""
        return [
            booking
            for booking in await self.find_all(status)
            if booking.event_id == event_id
        ]

    async def create(self, booking: Booking) -> Booking:
        """Insert a new booking."""
        if booking.id in self._bookings:
            raise PersistenceError(f"Booking {booking.id} already exists")
        self._bookings[booking.id] = booking
        return booking

    async def mark_approved(
        self, booking_id: BookingId, approved_at: datetime
    ) -> Booking:
        """Set a booking's status to approved."""
        booking = self._bookings.get(booking_id)
        if not booking:
            raise PersistenceError(f"Booking {booking_id} no longer exists")
        approved = booking.model_copy(
            update={"status": BookingStatus.APPROVED, "approved_at": approved_at}
        )
        self._bookings[booking_id] = approved
        return approved

    async def move_to_event(self, old_event_id: EventId, event: Event) -> int:
        """Re-point bookings at a rescheduled event, refreshing the echoed slot."""
        moved = 0
        for booking_id, booking in list(self._bookings.items()):
            if booking.event_id != old_event_id:
                continue
            self._bookings[booking_id] = booking.model_copy(
                update={
                    "event_id": event.id,
                    "event_title": event.title,
                    "event_date": event.date,
                    "event_start_time": event.start_time,
                    "event_end_time": event.end_time,
                }
            )
            moved += 1
        return moved

    async def delete(self, booking_id: BookingId) -> bool:
        """Delete a booking."""
        return self._bookings.pop(booking_id, None) is not None
