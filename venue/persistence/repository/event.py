"""PostgreSQL implementation of Event repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from venue.domain.error import EventAlreadyExistsError, PersistenceError
from venue.domain.model import Event
from venue.domain.repository import EventRepository
from venue.domain.value import BookingId, EventId, EventStatus, PerformerId
from venue.persistence.mappers import event_to_dict, row_to_event
from venue.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository.

    Every write runs in a savepoint, so a failed write leaves earlier work
    in the request's transaction intact.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID.

        Args:
            event_id: Event key ({date}_{HHMM})

        Returns:
            Event if found, None otherwise
        """
        stmt = select(events_table).where(events_table.c.id == event_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read event {event_id}") from e
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def find_all(self, status: Optional[EventStatus] = None) -> list[Event]:
        """List events in date and start time order."""
        stmt = select(events_table).order_by(
            events_table.c.date, events_table.c.start_time
        )
        if status:
            stmt = stmt.where(events_table.c.status == status.value)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to list events") from e
        return [row_to_event(dict(row)) for row in result.mappings().all()]

    async def list_calendar_event_ids(self) -> set[str]:
        """Calendar event ids attached to any event."""
        stmt = select(events_table.c.calendar_event_id).where(
            events_table.c.calendar_event_id.is_not(None)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to list calendar event ids") from e
        return {row.calendar_event_id for row in result.all()}

    async def create(self, event: Event) -> Event:
        """Insert a new event.

        Raises:
            EventAlreadyExistsError: If the key is taken
            PersistenceError: If the write fails
        """
        stmt = insert(events_table).values(**event_to_dict(event))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise EventAlreadyExistsError(event.id) from e
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to create event {event.id}") from e
        return event

    async def save(self, event: Event) -> Event:
        """Overwrite an existing event's row."""
        values = event_to_dict(event)
        values.pop("id")
        stmt = (
            update(events_table).where(events_table.c.id == event.id).values(**values)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to save event {event.id}") from e
        if result.rowcount == 0:
            raise PersistenceError(f"Event {event.id} no longer exists")
        return event

    async def mark_booked(
        self,
        event_id: EventId,
        performer_id: PerformerId,
        booking_id: BookingId,
        booked_at: datetime,
    ) -> Event:
        """Set status booked and bind the performer and booking."""
        stmt = (
            update(events_table)
            .where(events_table.c.id == event_id)
            .values(
                status=EventStatus.BOOKED.value,
                booked_performer_id=performer_id,
                booked_booking_id=booking_id,
                booked_at=booked_at,
            )
            .returning(*events_table.c)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to book event {event_id}") from e
        if not row:
            raise PersistenceError(f"Event {event_id} no longer exists")
        return row_to_event(dict(row))

    async def set_calendar_event_id(
        self, event_id: EventId, calendar_event_id: str
    ) -> bool:
        """Attach a calendar event id unless one is already set.

        The null check is part of the UPDATE, so concurrent approvals cannot
        both attach an id.
        """
        stmt = (
            update(events_table)
            .where(
                events_table.c.id == event_id,
                events_table.c.calendar_event_id.is_(None),
            )
            .values(calendar_event_id=calendar_event_id)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to store calendar event id for {event_id}"
            ) from e
        return result.rowcount > 0

    async def delete(self, event_id: EventId) -> bool:
        """Delete an event row."""
        stmt = delete(events_table).where(events_table.c.id == event_id)
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to delete event {event_id}") from e
        return result.rowcount > 0
