"""Approval domain service.

Approving a booking touches two aggregates (booking, event) and one external
system (the calendar), so it runs as a saga of independent steps rather
than a single transaction:

1. mark the booking approved            (failure aborts)
2. read the event's calendar event id
3. mark the event booked                (failure aborts; step 1 stays)
4. mirror into the calendar if no id    (failure is a warning)
5. delete competing pending bookings    (failures are warnings)

Every step's result is recorded in the returned ``ApprovalOutcome``.
"""

from datetime import datetime

import logfire

from venue.domain.error import (
    CalendarAuthRequiredError,
    CalendarError,
    EventAlreadyBookedError,
    NotFoundError,
    PersistenceError,
)
from venue.domain.model import ApprovalOutcome, Booking, Event, RejectOutcome, StepResult
from venue.domain.model.common import utcnow
from venue.domain.repository import BookingRepository, EventRepository
from venue.domain.value import (
    ApprovalStep,
    BookingId,
    BookingStatus,
    ErrorCode,
    StepStatus,
)

from .base import Service
from .calendar_service import CalendarService


class ApprovalService(Service):
    """Domain service orchestrating booking approval and rejection."""

    def __init__(
        self,
        booking_repository: BookingRepository,
        event_repository: EventRepository,
        calendar_service: CalendarService,
    ) -> None:
        """Initialize approval service.

        Args:
            booking_repository: Booking repository
            event_repository: Event repository
            calendar_service: Calendar domain service
        """
        self.booking_repository = booking_repository
        self.event_repository = event_repository
        self.calendar_service = calendar_service

    async def approve(
        self,
        booking_id: BookingId,
        access_token: str | None,
        now: datetime | None = None,
    ) -> ApprovalOutcome:
        """Approve a booking.

        Preconditions are checked before any write. Re-approving the booking
        that already holds the event is a retry: finished steps are skipped
        over and the calendar step runs again only if no id was stored.

        Args:
            booking_id: Booking to approve
            access_token: Calendar bearer credential
            now: Approval time (defaults to the current time)

        Returns:
            Outcome recording each step

        Raises:
            CalendarAuthRequiredError: If no credential was supplied
            NotFoundError: If the booking or its event does not exist
            EventAlreadyBookedError: If another booking holds the event
        """
        now = now or utcnow()

        with logfire.span("approval_service.approve", booking_id=str(booking_id)):
            if not access_token:
                logfire.warn(
                    "Approval without calendar credential", booking_id=str(booking_id)
                )
                raise CalendarAuthRequiredError()

            booking = await self.booking_repository.find_by_id(booking_id)
            if not booking:
                raise NotFoundError("Booking", str(booking_id))

            event = await self.event_repository.find_by_id(booking.event_id)
            if not event:
                raise NotFoundError("Event", booking.event_id)

            if event.is_booked and event.booked_booking_id != booking.id:
                logfire.warn(
                    "Event already booked by another booking",
                    event_id=event.id,
                    booked_booking_id=str(event.booked_booking_id),
                    booking_id=str(booking.id),
                )
                raise EventAlreadyBookedError(event.id, str(event.booked_booking_id))

            steps: list[StepResult] = []

            # Step 1
            approve_result = await self._approve_booking(booking, now)
            steps.append(approve_result)
            if approve_result.status == StepStatus.FAILED:
                return self._outcome(booking, steps)

            # Step 2: re-read so a retry sees an id stored by an earlier run
            current = await self.event_repository.find_by_id(booking.event_id)
            existing_calendar_id = (current or event).calendar_event_id

            # Step 3
            book_result = await self._book_event(current or event, booking, now)
            steps.append(book_result)
            if book_result.status == StepStatus.FAILED:
                logfire.error(
                    "Booking approved but event not booked; manual reconciliation needed",
                    booking_id=str(booking.id),
                    event_id=booking.event_id,
                )
                for skipped in (ApprovalStep.SYNC_CALENDAR, ApprovalStep.REMOVE_COMPETING):
                    steps.append(StepResult(step=skipped, status=StepStatus.SKIPPED))
                return self._outcome(booking, steps, existing_calendar_id)

            # Step 4
            sync_result, calendar_event_id = await self._sync_calendar(
                booking, existing_calendar_id, access_token
            )
            steps.append(sync_result)

            # Step 5
            cleanup_result, removed, failed = await self._remove_competing(booking)
            steps.append(cleanup_result)

            outcome = self._outcome(
                booking, steps, calendar_event_id, removed, failed
            )
            logfire.info(
                "Booking approved",
                booking_id=str(booking.id),
                event_id=booking.event_id,
                calendar_event_id=calendar_event_id,
                removed=len(removed),
                warnings=len(outcome.warnings),
            )
            return outcome

    async def reject(self, booking_id: BookingId) -> RejectOutcome:
        """Reject a booking by deleting it.

        Rejecting a booking that no longer exists succeeds.

        Raises:
            PersistenceError: If the deletion fails
        """
        with logfire.span("approval_service.reject", booking_id=str(booking_id)):
            deleted = await self.booking_repository.delete(booking_id)
            logfire.info("Booking rejected", booking_id=str(booking_id), deleted=deleted)
            return RejectOutcome(booking_id=booking_id, deleted=deleted)

    async def _approve_booking(self, booking: Booking, now: datetime) -> StepResult:
        if booking.status == BookingStatus.APPROVED:
            return StepResult(
                step=ApprovalStep.APPROVE_BOOKING,
                status=StepStatus.SUCCEEDED,
                message="Booking was already approved",
            )
        try:
            await self.booking_repository.mark_approved(booking.id, now)
        except PersistenceError as e:
            logfire.error(
                "Failed to approve booking", booking_id=str(booking.id), error=str(e)
            )
            return StepResult(
                step=ApprovalStep.APPROVE_BOOKING,
                status=StepStatus.FAILED,
                error_code=e.code,
                message=f"Could not approve booking: {e}",
            )
        return StepResult(step=ApprovalStep.APPROVE_BOOKING, status=StepStatus.SUCCEEDED)

    async def _book_event(
        self, event: Event, booking: Booking, now: datetime
    ) -> StepResult:
        if event.is_booked and event.booked_booking_id == booking.id:
            return StepResult(
                step=ApprovalStep.BOOK_EVENT,
                status=StepStatus.SUCCEEDED,
                message="Event was already booked",
            )
        try:
            await self.event_repository.mark_booked(
                event.id, booking.performer_id, booking.id, now
            )
        except PersistenceError as e:
            return StepResult(
                step=ApprovalStep.BOOK_EVENT,
                status=StepStatus.FAILED,
                error_code=e.code,
                message=f"Booking approved but event not marked booked: {e}",
            )
        return StepResult(step=ApprovalStep.BOOK_EVENT, status=StepStatus.SUCCEEDED)

    async def _sync_calendar(
        self,
        booking: Booking,
        existing_calendar_id: str | None,
        access_token: str,
    ) -> tuple[StepResult, str | None]:
        if existing_calendar_id:
            return (
                StepResult(
                    step=ApprovalStep.SYNC_CALENDAR,
                    status=StepStatus.SKIPPED,
                    message="Calendar event already attached",
                ),
                existing_calendar_id,
            )

        try:
            created_id = await self.calendar_service.create_for_booking(
                booking, access_token
            )
        except CalendarError as e:
            logfire.warn(
                "Calendar sync failed", booking_id=str(booking.id), error=str(e)
            )
            return (
                StepResult(
                    step=ApprovalStep.SYNC_CALENDAR,
                    status=StepStatus.FAILED,
                    error_code=e.code,
                    message=f"Approved, but the calendar was not updated: {e}",
                ),
                None,
            )

        try:
            written = await self.event_repository.set_calendar_event_id(
                booking.event_id, created_id
            )
        except PersistenceError as e:
            # Unrecorded remote events would be duplicated by a retry
            await self.calendar_service.remove(created_id, access_token)
            return (
                StepResult(
                    step=ApprovalStep.SYNC_CALENDAR,
                    status=StepStatus.FAILED,
                    error_code=ErrorCode.PERSISTENCE_ERROR,
                    message=f"Approved, but the calendar event id was not saved: {e}",
                ),
                None,
            )

        if not written:
            # A concurrent approval attached its id first; keep that one
            await self.calendar_service.remove(created_id, access_token)
            current = await self.event_repository.find_by_id(booking.event_id)
            kept_id = current.calendar_event_id if current else None
            return (
                StepResult(
                    step=ApprovalStep.SYNC_CALENDAR,
                    status=StepStatus.SKIPPED,
                    message="Calendar event already attached",
                ),
                kept_id,
            )

        return (
            StepResult(step=ApprovalStep.SYNC_CALENDAR, status=StepStatus.SUCCEEDED),
            created_id,
        )

    async def _remove_competing(
        self, booking: Booking
    ) -> tuple[StepResult, list[BookingId], list[BookingId]]:
        try:
            pending = await self.booking_repository.find_by_event(
                booking.event_id, BookingStatus.PENDING
            )
        except PersistenceError as e:
            return (
                StepResult(
                    step=ApprovalStep.REMOVE_COMPETING,
                    status=StepStatus.FAILED,
                    error_code=e.code,
                    message=f"Competing bookings could not be listed: {e}",
                ),
                [],
                [],
            )
        removed: list[BookingId] = []
        failed: list[BookingId] = []
        for other in pending:
            if other.id == booking.id:
                continue
            try:
                await self.booking_repository.delete(other.id)
                removed.append(other.id)
            except PersistenceError as e:
                logfire.warn(
                    "Failed to remove competing booking",
                    booking_id=str(other.id),
                    error=str(e),
                )
                failed.append(other.id)

        if failed:
            result = StepResult(
                step=ApprovalStep.REMOVE_COMPETING,
                status=StepStatus.FAILED,
                error_code=ErrorCode.PERSISTENCE_ERROR,
                message=f"{len(failed)} competing booking(s) could not be removed",
            )
        else:
            result = StepResult(
                step=ApprovalStep.REMOVE_COMPETING, status=StepStatus.SUCCEEDED
            )
        return result, removed, failed

    @staticmethod
    def _outcome(
        booking: Booking,
        steps: list[StepResult],
        calendar_event_id: str | None = None,
        removed: list[BookingId] | None = None,
        failed: list[BookingId] | None = None,
    ) -> ApprovalOutcome:
        return ApprovalOutcome(
            booking_id=booking.id,
            event_id=booking.event_id,
            steps=steps,
            calendar_event_id=calendar_event_id,
            removed_booking_ids=removed or [],
            failed_removal_ids=failed or [],
        )
