"""Reject booking use case."""

from uuid import UUID

from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError
from venue.domain.service import ApprovalService
from venue.domain.value import BookingId


class RejectBookingRequest(BaseModel):
    """Reject booking request."""

    booking_id: UUID


class RejectBookingResponse(UseCaseResponse):
    """Reject booking response."""

    booking_id: UUID
    deleted: bool = False


class RejectBookingUseCase(BaseUseCase):
    """Use case for rejecting (deleting) a booking."""

    def __init__(self, approval_service: ApprovalService) -> None:
        self.approval_service = approval_service

    async def execute(self, request: RejectBookingRequest) -> RejectBookingResponse:
        try:
            outcome = await self.approval_service.reject(BookingId(request.booking_id))
        except DomainError as e:
            return RejectBookingResponse(
                booking_id=request.booking_id, **self.failure(e)
            )

        return RejectBookingResponse(
            booking_id=outcome.booking_id, deleted=outcome.deleted
        )
