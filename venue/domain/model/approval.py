"""Outcomes of the approval saga.

Approval runs as independent steps rather than one transaction. The outcome
records what each step did so callers can see, and retry, a partially
applied approval.
"""

from typing import Optional

from pydantic import computed_field

from venue.domain.model.common import DomainModel
from venue.domain.value import (
    ApprovalStep,
    BookingId,
    ErrorCode,
    EventId,
    StepStatus,
)


class StepResult(DomainModel):
    """Result of one approval step."""

    step: ApprovalStep
    status: StepStatus
    error_code: Optional[ErrorCode] = None
    message: Optional[str] = None


class ApprovalOutcome(DomainModel):
    """Step-by-step record of an approval.

    ``approved`` is True once the booking is approved and the event booked.
    Calendar and cleanup failures after that point are warnings only.
    """

    booking_id: BookingId
    event_id: EventId
    steps: list[StepResult] = []
    calendar_event_id: Optional[str] = None
    removed_booking_ids: list[BookingId] = []
    failed_removal_ids: list[BookingId] = []

    def step(self, step: ApprovalStep) -> Optional[StepResult]:
        """Result recorded for ``step``, if it ran."""
        for result in self.steps:
            if result.step == step:
                return result
        return None

    @computed_field
    @property
    def approved(self) -> bool:
        """Whether both store-side transitions succeeded."""
        for required in (ApprovalStep.APPROVE_BOOKING, ApprovalStep.BOOK_EVENT):
            result = self.step(required)
            if result is None or result.status != StepStatus.SUCCEEDED:
                return False
        return True

    @computed_field
    @property
    def warnings(self) -> list[str]:
        """Messages of failed steps that did not fail the approval."""
        if not self.approved:
            return []
        return [
            result.message or result.step.value
            for result in self.steps
            if result.status == StepStatus.FAILED
        ]


class RejectOutcome(DomainModel):
    """Result of rejecting a booking.

    ``deleted`` is False when the booking was already gone.
    """

    booking_id: BookingId
    deleted: bool
