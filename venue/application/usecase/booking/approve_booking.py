"""Approve booking use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError
from venue.domain.model import ApprovalOutcome, Booking, Event
from venue.domain.service import ApprovalService, BookingService, EventService
from venue.domain.value import BookingId


class ApproveBookingRequest(BaseModel):
    """Approve booking request."""

    booking_id: UUID
    access_token: str | None = None  # Calendar bearer credential


class ApproveBookingResponse(UseCaseResponse):
    """Approve booking response.

    ``outcome`` records each step; ``booking`` and ``event`` are re-read
    after the run so callers see what was actually stored.
    """

    outcome: ApprovalOutcome | None = None
    booking: Booking | None = None
    event: Event | None = None


class ApproveBookingUseCase(BaseUseCase):
    """Use case for approving a booking."""

    def __init__(
        self,
        approval_service: ApprovalService,
        booking_service: BookingService,
        event_service: EventService,
    ) -> None:
        """Initialize approve booking use case.

        Args:
            approval_service: Approval domain service
            booking_service: Booking domain service
            event_service: Event domain service
        """
        self.approval_service = approval_service
        self.booking_service = booking_service
        self.event_service = event_service

    async def execute(self, request: ApproveBookingRequest) -> ApproveBookingResponse:
        """Approve a booking and report the resulting state.

        Args:
            request: Booking id and calendar credential

        Returns:
            Response with the step outcome and post-approval booking and event
        """
        booking_id = BookingId(request.booking_id)

        try:
            outcome = await self.approval_service.approve(
                booking_id, request.access_token
            )
        except DomainError as e:
            logfire.info(
                "Approval refused", booking_id=str(booking_id), error=e.code.value
            )
            return ApproveBookingResponse(**self.failure(e))

        booking: Booking | None = None
        event: Event | None = None
        try:
            booking = await self.booking_service.get_booking(booking_id)
            event = await self.event_service.get_event(outcome.event_id)
        except DomainError as e:
            logfire.warn(
                "Post-approval state unreadable",
                booking_id=str(booking_id),
                error=str(e),
            )

        if not outcome.approved:
            failed = next(
                (s for s in outcome.steps if s.error_code is not None), None
            )
            return ApproveBookingResponse(
                outcome=outcome,
                booking=booking,
                event=event,
                error=failed.error_code if failed else None,
                message=failed.message if failed else None,
            )

        return ApproveBookingResponse(
            outcome=outcome,
            booking=booking,
            event=event,
            message="; ".join(outcome.warnings) or None,
        )
