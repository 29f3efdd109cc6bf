"""Unit tests for EventService."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from venue.adapter.google_calendar import GoogleCalendarClient
from venue.domain.error import (
    EventAlreadyExistsError,
    NotFoundError,
    ValidationError,
)
from venue.domain.model import Booking
from venue.domain.repository import (
    BookingRepository,
    EventRepository,
    InvitationRepository,
)
from venue.domain.service import EventService, InvitationService
from venue.domain.value import AdminId, BookingId, EventId, EventStatus, PerformerId
from tests.conftest import make_event
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

ADMIN = AdminId("admin-1")


def _booking(event_id: EventId) -> Booking:
    return Booking(
        id=BookingId(uuid4()),
        event_id=event_id,
        performer_id=PerformerId("band_x_com"),
        performer_name="The Band",
        performer_email="band@x.com",
        event_title="Friday Night Jazz",
        event_date="2024-05-01",
        event_start_time="19:00",
        event_end_time="21:00",
    )


async def _create(service: EventService, **overrides):
    fields = {
        "admin_id": ADMIN,
        "title": "Friday Night Jazz",
        "date": "2024-05-01",
        "start_time": "19:00",
        "end_time": "21:00",
        "performer_email": "band@x.com",
    }
    fields.update(overrides)
    return await service.create_event(**fields)


class TestCreateEvent:
    """Tests for create_event."""

    @pytest.mark.asyncio
    async def test_create_event_derives_key(self, unit_env):
        """The id is the date plus compact start time."""
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)

        event = await _create(event_service)

        assert event.id == "2024-05-01_1900"
        assert event.status == EventStatus.PENDING
        assert event.calendar_event_id is None
        assert event.booked_performer_id is None
        assert await event_repo.find_by_id(EventId("2024-05-01_1900")) == event

    @pytest.mark.asyncio
    async def test_create_event_same_slot_refused(self, unit_env):
        """A second event at the same date and start time is refused."""
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)
        original = await _create(event_service)

        with pytest.raises(EventAlreadyExistsError):
            await _create(event_service, title="Other Show", end_time="23:00")

        assert await event_repo.find_by_id(original.id) == original

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"date": "05/01/2024"},
            {"start_time": "7pm"},
            {"end_time": "25:00"},
            {"title": ""},
        ],
    )
    async def test_create_event_malformed_fields(self, unit_env, overrides):
        """Malformed fields surface as ValidationError."""
        event_service = await unit_env.get(EventService)

        with pytest.raises(ValidationError):
            await _create(event_service, **overrides)

    @pytest.mark.asyncio
    async def test_create_event_allows_overnight_slot(self, unit_env):
        """End before start is an overnight slot, not an error."""
        event_service = await unit_env.get(EventService)

        event = await _create(event_service, start_time="22:00", end_time="01:00")

        assert event.end_time == "01:00"


class TestUpdateEvent:
    """Tests for update_event."""

    @pytest.mark.asyncio
    async def test_update_keeps_booking_state(self, unit_env):
        """Editing details keeps calendar id, status and creation time."""
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)
        created = await _create(event_service)
        await event_repo.mark_booked(
            created.id,
            PerformerId("band_x_com"),
            BookingId(uuid4()),
            datetime(2024, 4, 21, tzinfo=timezone.utc),
        )
        await event_repo.set_calendar_event_id(created.id, "gcal-1")
        now = datetime(2024, 4, 22, tzinfo=timezone.utc)

        updated = await event_service.update_event(
            created.id,
            title="Late Jazz",
            date="2024-05-01",
            start_time="19:00",
            end_time="22:30",
            description="Two sets",
            now=now,
        )

        assert updated.title == "Late Jazz"
        assert updated.end_time == "22:30"
        assert updated.description == "Two sets"
        assert updated.updated_at == now
        assert updated.created_at == created.created_at
        assert updated.status == EventStatus.BOOKED
        assert updated.calendar_event_id == "gcal-1"
        assert updated.booked_performer_id == "band_x_com"

    @pytest.mark.asyncio
    async def test_update_moves_pending_event(self, unit_env):
        """A new start re-keys the event; bookings and invitations follow."""
        # Arrange
        event_service = await unit_env.get(EventService)
        invitation_service = await unit_env.get(InvitationService)
        event_repo = await unit_env.get(EventRepository)
        booking_repo = await unit_env.get(BookingRepository)
        invitation_repo = await unit_env.get(InvitationRepository)
        created = await _create(event_service)
        booking = await booking_repo.create(_booking(created.id))
        invitation = await invitation_service.issue(created.id)

        # Act
        moved = await event_service.update_event(
            created.id,
            title="Saturday Jazz",
            date="2024-05-02",
            start_time="20:00",
            end_time="22:00",
        )

        # Assert
        assert moved.id == "2024-05-02_2000"
        assert moved.created_at == created.created_at
        assert moved.updated_at is not None
        assert await event_repo.find_by_id(created.id) is None
        assert await event_repo.find_by_id(moved.id) == moved

        followed = await booking_repo.find_by_id(booking.id)
        assert followed.event_id == moved.id
        assert followed.event_title == "Saturday Jazz"
        assert followed.event_date == "2024-05-02"
        assert followed.event_start_time == "20:00"
        assert followed.event_end_time == "22:00"
        assert (await invitation_repo.find_by_id(invitation.id)).event_id == moved.id

    @pytest.mark.asyncio
    async def test_update_cannot_move_booked_event(self, unit_env):
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)
        created = await _create(event_service)
        await event_repo.mark_booked(
            created.id,
            PerformerId("band_x_com"),
            BookingId(uuid4()),
            datetime(2024, 4, 21, tzinfo=timezone.utc),
        )

        with pytest.raises(ValidationError, match="booked event cannot be moved"):
            await event_service.update_event(
                created.id,
                title=created.title,
                date="2024-05-02",
                start_time="19:00",
                end_time="21:00",
            )

        assert await event_repo.find_by_id(EventId("2024-05-02_1900")) is None

    @pytest.mark.asyncio
    async def test_update_move_to_taken_slot(self, unit_env):
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)
        created = await _create(event_service)
        taken = await _create(event_service, date="2024-05-02", title="Other Show")

        with pytest.raises(EventAlreadyExistsError):
            await event_service.update_event(
                created.id,
                title=created.title,
                date="2024-05-02",
                start_time="19:00",
                end_time="21:00",
            )

        assert await event_repo.find_by_id(created.id) == created
        assert await event_repo.find_by_id(taken.id) == taken

    @pytest.mark.asyncio
    async def test_update_missing_event(self, unit_env):
        event_service = await unit_env.get(EventService)

        with pytest.raises(NotFoundError):
            await event_service.update_event(
                EventId("2030-01-01_1200"),
                title="Ghost",
                date="2030-01-01",
                start_time="12:00",
                end_time="13:00",
            )


class TestDeleteEvent:
    """Tests for delete_event."""

    @pytest.mark.asyncio
    async def test_delete_removes_calendar_mirror(self, unit_env):
        """Deleting an event with a calendar id deletes the remote event too."""
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)
        calendar = await unit_env.get(GoogleCalendarClient)
        await event_repo.create(make_event(calendar_event_id="gcal-9"))

        deleted = await event_service.delete_event(
            EventId("2024-05-01_1900"), access_token="tok"
        )

        assert deleted is True
        assert calendar.deleted == ["gcal-9"]
        assert await event_repo.find_by_id(EventId("2024-05-01_1900")) is None

    @pytest.mark.asyncio
    async def test_delete_without_token_skips_calendar(self, unit_env):
        """Without a credential only the stored event is removed."""
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)
        calendar = await unit_env.get(GoogleCalendarClient)
        await event_repo.create(make_event(calendar_event_id="gcal-9"))

        with patch.object(calendar, "delete_event", AsyncMock()) as delete_remote:
            deleted = await event_service.delete_event(
                EventId("2024-05-01_1900"), access_token=None
            )

        assert deleted is True
        delete_remote.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_survives_calendar_failure(self, unit_env):
        """A failed calendar deletion never blocks the store deletion."""
        event_service = await unit_env.get(EventService)
        event_repo = await unit_env.get(EventRepository)
        calendar = await unit_env.get(GoogleCalendarClient)
        calendar.fail_delete = True
        await event_repo.create(make_event(calendar_event_id="gcal-9"))

        deleted = await event_service.delete_event(
            EventId("2024-05-01_1900"), access_token="tok"
        )

        assert deleted is True
        assert await event_repo.find_by_id(EventId("2024-05-01_1900")) is None

    @pytest.mark.asyncio
    async def test_delete_absent_event(self, unit_env):
        event_service = await unit_env.get(EventService)

        assert await event_service.delete_event(EventId("2030-01-01_1200"), "tok") is False
