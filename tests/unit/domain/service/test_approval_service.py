"""Unit tests for the booking approval saga."""

from datetime import timedelta
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from venue.adapter.google_calendar import GoogleCalendarClient
from venue.domain.error import (
    CalendarAuthRequiredError,
    CalendarRemoteError,
    EventAlreadyBookedError,
    NotFoundError,
    PersistenceError,
)
from venue.domain.model import Booking
from venue.domain.repository import BookingRepository, EventRepository
from venue.domain.service import ApprovalService
from venue.domain.value import (
    ApprovalStep,
    BookingId,
    BookingStatus,
    ErrorCode,
    EventId,
    EventStatus,
    PerformerId,
    StepStatus,
)
from tests.conftest import T0, make_event
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

EVENT_ID = EventId("2024-05-01_1900")
APPROVED_AT = T0 + timedelta(days=1)


def make_booking(name: str, minutes: int = 0) -> Booking:
    """Pending booking for the default event."""
    email = f"{name.lower()}@x.com"
    return Booking(
        id=BookingId(uuid4()),
        event_id=EVENT_ID,
        performer_id=PerformerId(email.replace("@", "_").replace(".", "_")),
        performer_name=name,
        performer_email=email,
        event_title="Friday Night Jazz",
        event_date="2024-05-01",
        event_start_time="19:00",
        event_end_time="21:00",
        created_at=T0 + timedelta(minutes=minutes),
    )


async def _seed(env, *bookings: Booking) -> None:
    event_repo = await env.get(EventRepository)
    booking_repo = await env.get(BookingRepository)
    await event_repo.create(make_event())
    for booking in bookings:
        await booking_repo.create(booking)


class TestApprove:
    """Tests for approve."""

    @pytest.mark.asyncio
    async def test_approve_runs_every_step(self, unit_env):
        """Approval books the event, mirrors it and removes competitors."""
        # Arrange
        chosen = make_booking("Alpha")
        other = make_booking("Beta", minutes=1)
        await _seed(unit_env, chosen, other)
        service = await unit_env.get(ApprovalService)
        event_repo = await unit_env.get(EventRepository)
        booking_repo = await unit_env.get(BookingRepository)
        calendar = await unit_env.get(GoogleCalendarClient)

        # Act
        outcome = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        # Assert
        assert outcome.approved is True
        assert outcome.warnings == []
        assert outcome.calendar_event_id == "mock-gcal-1"
        assert outcome.removed_booking_ids == [other.id]
        assert [r.status for r in outcome.steps] == [StepStatus.SUCCEEDED] * 4

        event = await event_repo.find_by_id(EVENT_ID)
        assert event.status == EventStatus.BOOKED
        assert event.booked_booking_id == chosen.id
        assert event.booked_performer_id == "alpha_x_com"
        assert event.booked_at == APPROVED_AT
        assert event.calendar_event_id == "mock-gcal-1"

        approved = await booking_repo.find_by_id(chosen.id)
        assert approved.status == BookingStatus.APPROVED
        assert approved.approved_at == APPROVED_AT
        assert await booking_repo.find_by_id(other.id) is None
        assert calendar.events["mock-gcal-1"].summary == "Friday Night Jazz"

    @pytest.mark.asyncio
    async def test_approve_without_credential_changes_nothing(self, unit_env):
        chosen = make_booking("Alpha")
        await _seed(unit_env, chosen)
        service = await unit_env.get(ApprovalService)
        event_repo = await unit_env.get(EventRepository)
        booking_repo = await unit_env.get(BookingRepository)

        with pytest.raises(CalendarAuthRequiredError):
            await service.approve(chosen.id, None)

        assert (await booking_repo.find_by_id(chosen.id)).status == BookingStatus.PENDING
        assert (await event_repo.find_by_id(EVENT_ID)).status == EventStatus.PENDING

    @pytest.mark.asyncio
    async def test_approve_missing_booking(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(ApprovalService)

        with pytest.raises(NotFoundError):
            await service.approve(BookingId(uuid4()), "tok")

    @pytest.mark.asyncio
    async def test_approve_booking_for_deleted_event(self, unit_env):
        """A pending booking left behind by a deleted event cannot be approved."""
        chosen = make_booking("Alpha")
        await _seed(unit_env, chosen)
        event_repo = await unit_env.get(EventRepository)
        service = await unit_env.get(ApprovalService)
        await event_repo.delete(EVENT_ID)

        with pytest.raises(NotFoundError):
            await service.approve(chosen.id, "tok")

    @pytest.mark.asyncio
    async def test_calendar_failure_is_a_warning(self, unit_env):
        """The booking stays approved when the calendar write fails."""
        chosen = make_booking("Alpha")
        await _seed(unit_env, chosen)
        service = await unit_env.get(ApprovalService)
        event_repo = await unit_env.get(EventRepository)
        calendar = await unit_env.get(GoogleCalendarClient)
        calendar.fail_create = CalendarRemoteError("Calendar unavailable", 503)

        outcome = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        assert outcome.approved is True
        assert len(outcome.warnings) == 1
        assert "Calendar unavailable" in outcome.warnings[0]
        sync = outcome.step(ApprovalStep.SYNC_CALENDAR)
        assert sync.status == StepStatus.FAILED
        assert sync.error_code == ErrorCode.REMOTE_ERROR

        event = await event_repo.find_by_id(EVENT_ID)
        assert event.status == EventStatus.BOOKED
        assert event.calendar_event_id is None

    @pytest.mark.asyncio
    async def test_retry_after_calendar_failure_mirrors(self, unit_env):
        """Approving again after a calendar failure fills in the calendar."""
        chosen = make_booking("Alpha")
        await _seed(unit_env, chosen)
        service = await unit_env.get(ApprovalService)
        event_repo = await unit_env.get(EventRepository)
        calendar = await unit_env.get(GoogleCalendarClient)
        calendar.fail_create = CalendarRemoteError("Calendar unavailable", 503)
        await service.approve(chosen.id, "tok", now=APPROVED_AT)
        calendar.fail_create = None

        outcome = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        assert outcome.approved is True
        assert outcome.warnings == []
        assert outcome.calendar_event_id == "mock-gcal-1"
        assert (await event_repo.find_by_id(EVENT_ID)).calendar_event_id == "mock-gcal-1"

    @pytest.mark.asyncio
    async def test_retry_reuses_calendar_event(self, unit_env):
        """A second approval never creates a second calendar event."""
        chosen = make_booking("Alpha")
        await _seed(unit_env, chosen)
        service = await unit_env.get(ApprovalService)
        calendar = await unit_env.get(GoogleCalendarClient)
        first = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        second = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        assert second.approved is True
        assert second.calendar_event_id == first.calendar_event_id
        assert second.step(ApprovalStep.SYNC_CALENDAR).status == StepStatus.SKIPPED
        assert list(calendar.events) == ["mock-gcal-1"]

    @pytest.mark.asyncio
    async def test_other_booking_for_booked_event(self, unit_env):
        """A booked event cannot be given to a second booking."""
        chosen = make_booking("Alpha")
        await _seed(unit_env, chosen)
        service = await unit_env.get(ApprovalService)
        booking_repo = await unit_env.get(BookingRepository)
        event_repo = await unit_env.get(EventRepository)
        await service.approve(chosen.id, "tok", now=APPROVED_AT)
        late = make_booking("Gamma", minutes=5)
        await booking_repo.create(late)

        with pytest.raises(EventAlreadyBookedError):
            await service.approve(late.id, "tok")

        assert (await booking_repo.find_by_id(late.id)).status == BookingStatus.PENDING
        assert (await event_repo.find_by_id(EVENT_ID)).booked_booking_id == chosen.id

    @pytest.mark.asyncio
    async def test_event_write_failure_stops_saga(self, unit_env):
        """If the event cannot be booked, later steps are skipped."""
        chosen = make_booking("Alpha")
        other = make_booking("Beta", minutes=1)
        await _seed(unit_env, chosen, other)
        service = await unit_env.get(ApprovalService)
        event_repo = await unit_env.get(EventRepository)
        booking_repo = await unit_env.get(BookingRepository)
        calendar = await unit_env.get(GoogleCalendarClient)

        with patch.object(
            event_repo,
            "mark_booked",
            AsyncMock(side_effect=PersistenceError("connection lost")),
        ):
            outcome = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        assert outcome.approved is False
        assert outcome.warnings == []
        assert [r.status for r in outcome.steps] == [
            StepStatus.SUCCEEDED,
            StepStatus.FAILED,
            StepStatus.SKIPPED,
            StepStatus.SKIPPED,
        ]
        assert outcome.step(ApprovalStep.BOOK_EVENT).error_code == (
            ErrorCode.PERSISTENCE_ERROR
        )
        # Step 1 is not undone
        assert (await booking_repo.find_by_id(chosen.id)).status == BookingStatus.APPROVED
        assert await booking_repo.find_by_id(other.id) is not None
        assert calendar.events == {}

    @pytest.mark.asyncio
    async def test_unsaved_calendar_id_removes_remote_event(self, unit_env):
        """A created calendar event whose id cannot be stored is deleted again."""
        chosen = make_booking("Alpha")
        await _seed(unit_env, chosen)
        service = await unit_env.get(ApprovalService)
        event_repo = await unit_env.get(EventRepository)
        calendar = await unit_env.get(GoogleCalendarClient)

        with patch.object(
            event_repo,
            "set_calendar_event_id",
            AsyncMock(side_effect=PersistenceError("connection lost")),
        ):
            outcome = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        assert outcome.approved is True
        assert outcome.calendar_event_id is None
        assert outcome.step(ApprovalStep.SYNC_CALENDAR).status == StepStatus.FAILED
        assert calendar.deleted == ["mock-gcal-1"]
        assert calendar.events == {}

    @pytest.mark.asyncio
    async def test_competing_removal_failure_is_a_warning(self, unit_env):
        chosen = make_booking("Alpha")
        other = make_booking("Beta", minutes=1)
        await _seed(unit_env, chosen, other)
        service = await unit_env.get(ApprovalService)
        booking_repo = await unit_env.get(BookingRepository)

        with patch.object(
            booking_repo,
            "delete",
            AsyncMock(side_effect=PersistenceError("connection lost")),
        ):
            outcome = await service.approve(chosen.id, "tok", now=APPROVED_AT)

        assert outcome.approved is True
        assert outcome.failed_removal_ids == [other.id]
        assert outcome.removed_booking_ids == []
        assert len(outcome.warnings) == 1


class TestReject:
    """Tests for reject."""

    @pytest.mark.asyncio
    async def test_reject_deletes_booking(self, unit_env):
        booking = make_booking("Alpha")
        await _seed(unit_env, booking)
        service = await unit_env.get(ApprovalService)
        booking_repo = await unit_env.get(BookingRepository)

        outcome = await service.reject(booking.id)

        assert outcome.deleted is True
        assert await booking_repo.find_by_id(booking.id) is None

    @pytest.mark.asyncio
    async def test_reject_missing_booking_succeeds(self, unit_env):
        service = await unit_env.get(ApprovalService)

        outcome = await service.reject(BookingId(uuid4()))

        assert outcome.deleted is False
