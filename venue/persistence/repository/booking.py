"""PostgreSQL implementation of Booking repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from venue.domain.error import PersistenceError
from venue.domain.model import Booking, Event
from venue.domain.repository import BookingRepository
from venue.domain.value import BookingId, BookingStatus, EventId
from venue.persistence.mappers import booking_to_dict, row_to_booking
from venue.persistence.tables import bookings_table


class PostgresBookingRepository(BookingRepository):
    """PostgreSQL implementation of BookingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch(self, stmt, what: str) -> list[Booking]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read {what}") from e
        return [row_to_booking(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """Find a booking by ID.

        Args:
            booking_id: Booking ID to look up

        Returns:
            Booking if found, None otherwise
        """
        stmt = select(bookings_table).where(bookings_table.c.id == booking_id)
        bookings = await self._fetch(stmt, f"booking {booking_id}")
        return bookings[0] if bookings else None

    async def find_all(self, status: Optional[BookingStatus] = None) -> list[Booking]:
        """List bookings, oldest first."""
        stmt = select(bookings_table).order_by(bookings_table.c.created_at)
        if status:
            stmt = stmt.where(bookings_table.c.status == status.value)
        return await self._fetch(stmt, "bookings")

    async def find_by_event(
        self, event_id: EventId, status: Optional[BookingStatus] = None
    ) -> list[Booking]:
        """List bookings for one event, oldest first."""
        stmt = (
            select(bookings_table)
            .where(bookings_table.c.event_id == event_id)
            .order_by(bookings_table.c.created_at)
        )
        if status:
            stmt = stmt.where(bookings_table.c.status == status.value)
        return await self._fetch(stmt, f"bookings for event {event_id}")

    async def create(self, booking: Booking) -> Booking:
        """Insert a new booking."""
        stmt = insert(bookings_table).values(**booking_to_dict(booking))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to create booking {booking.id}") from e
        return booking

    async def mark_approved(
        self, booking_id: BookingId, approved_at: datetime
    ) -> Booking:
        """Set a booking's status to approved."""
        stmt = (
            update(bookings_table)
            .where(bookings_table.c.id == booking_id)
            .values(status=BookingStatus.APPROVED.value, approved_at=approved_at)
            .returning(*bookings_table.c)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to approve booking {booking_id}") from e
        if not row:
            raise PersistenceError(f"Booking {booking_id} no longer exists")
        return row_to_booking(dict(row))

    async def move_to_event(self, old_event_id: EventId, event: Event) -> int:
        """Re-point bookings at a rescheduled event, refreshing the echoed slot."""
        stmt = (
            update(bookings_table)
            .where(bookings_table.c.event_id == old_event_id)
            .values(
                event_id=event.id,
                event_title=event.title,
                event_date=event.date,
                event_start_time=event.start_time,
                event_end_time=event.end_time,
            )
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to move bookings from {old_event_id} to {event.id}"
            ) from e
        return result.rowcount

    async def delete(self, booking_id: BookingId) -> bool:
        """Delete a booking row."""
        stmt = delete(bookings_table).where(bookings_table.c.id == booking_id)
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to delete booking {booking_id}") from e
        return result.rowcount > 0
