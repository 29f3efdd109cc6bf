"""Event domain service."""

from datetime import datetime

import logfire

from venue.domain.error import (
    EventAlreadyExistsError,
    NotFoundError,
    ValidationError,
)
from venue.domain.model import Event
from venue.domain.model.common import utcnow
from venue.domain.repository import (
    BookingRepository,
    EventRepository,
    InvitationRepository,
)
from venue.domain.value import AdminId, EventId, event_key

from .base import Service
from .calendar_service import CalendarService


class EventService(Service):
    """Domain service for the event catalog."""

    def __init__(
        self,
        event_repository: EventRepository,
        booking_repository: BookingRepository,
        invitation_repository: InvitationRepository,
        calendar_service: CalendarService,
    ) -> None:
        """Initialize event service.

        Args:
            event_repository: Event repository
            booking_repository: Booking repository (for moves)
            invitation_repository: Invitation repository (for moves)
            calendar_service: Calendar domain service (for deletions)
        """
        self.event_repository = event_repository
        self.booking_repository = booking_repository
        self.invitation_repository = invitation_repository
        self.calendar_service = calendar_service

    async def create_event(
        self,
        admin_id: AdminId,
        title: str,
        date: str,
        start_time: str,
        end_time: str,
        description: str = "",
        performer_email: str | None = None,
        now: datetime | None = None,
    ) -> Event:
        """Publish a new pending event.

        The id is derived from date and start time; an existing event at the
        same instant is never overwritten.

        Returns:
            Created event

        Raises:
            ValidationError: If the date or times are malformed
            EventAlreadyExistsError: If the slot is taken
        """
        try:
            event_id = event_key(date, start_time)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        with logfire.span("event_service.create_event", event_id=event_id):
            if await self.event_repository.find_by_id(event_id):
                logfire.warn("Event slot already taken", event_id=event_id)
                raise EventAlreadyExistsError(event_id)

            try:
                event = Event(
                    id=event_id,
                    title=title,
                    date=date,
                    start_time=start_time,
                    end_time=end_time,
                    description=description,
                    performer_email=performer_email,
                    admin_id=admin_id,
                    created_at=now or utcnow(),
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            saved = await self.event_repository.create(event)
            logfire.info("Event created", event_id=event_id, admin_id=admin_id)
            return saved

    async def get_event(self, event_id: EventId) -> Event:
        """Get an event by id.

        Raises:
            NotFoundError: If the event does not exist
        """
        event = await self.event_repository.find_by_id(event_id)
        if not event:
            raise NotFoundError("Event", event_id)
        return event

    async def update_event(
        self,
        event_id: EventId,
        title: str,
        date: str,
        start_time: str,
        end_time: str,
        description: str = "",
        performer_email: str | None = None,
        now: datetime | None = None,
    ) -> Event:
        """Edit an event's details, or move it to a new slot.

        The calendar id, status, booking binding and creation time are kept.
        Changing the date or start time changes the event's key: the event is
        re-created under the new key and its bookings and invitations follow
        it. Only pending events can move.

        Returns:
            Updated event

        Raises:
            NotFoundError: If the event does not exist
            ValidationError: If a booked event would move or a field is malformed
            EventAlreadyExistsError: If the new slot is taken
        """
        with logfire.span("event_service.update_event", event_id=event_id):
            existing = await self.get_event(event_id)

            try:
                new_id = event_key(date, start_time)
                updated = Event.model_validate(
                    {
                        **existing.model_dump(),
                        "id": new_id,
                        "title": title,
                        "date": date,
                        "start_time": start_time,
                        "end_time": end_time,
                        "description": description,
                        "performer_email": performer_email,
                        "updated_at": now or utcnow(),
                    }
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            if new_id == event_id:
                saved = await self.event_repository.save(updated)
                logfire.info("Event updated", event_id=event_id)
                return saved

            return await self._move(existing, updated)

    async def _move(self, existing: Event, moved: Event) -> Event:
        if existing.is_booked:
            logfire.warn(
                "Booked event move rejected", event_id=existing.id, new_id=moved.id
            )
            raise ValidationError(
                "A booked event cannot be moved; delete and recreate it"
            )
        if await self.event_repository.find_by_id(moved.id):
            logfire.warn("Event slot already taken", event_id=moved.id)
            raise EventAlreadyExistsError(moved.id)

        saved = await self.event_repository.create(moved)
        bookings = await self.booking_repository.move_to_event(existing.id, saved)
        invitations = await self.invitation_repository.move_to_event(
            existing.id, saved.id
        )
        await self.event_repository.delete(existing.id)

        logfire.info(
            "Event moved",
            event_id=existing.id,
            new_id=saved.id,
            bookings=bookings,
            invitations=invitations,
        )
        return saved

    async def delete_event(self, event_id: EventId, access_token: str | None) -> bool:
        """Delete an event and, best effort, its calendar mirror.

        The calendar deletion only runs when a credential is present; its
        failure never blocks the store deletion.

        Returns:
            True if the event existed and was deleted
        """
        with logfire.span("event_service.delete_event", event_id=event_id):
            event = await self.event_repository.find_by_id(event_id)
            if not event:
                logfire.info("Event already absent", event_id=event_id)
                return False

            if event.calendar_event_id and access_token:
                await self.calendar_service.remove(
                    event.calendar_event_id, access_token
                )

            deleted = await self.event_repository.delete(event_id)
            logfire.info("Event deleted", event_id=event_id)
            return deleted
