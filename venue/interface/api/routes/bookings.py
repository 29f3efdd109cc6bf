"""Booking review routes (administrator facing)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from venue.application.usecase.booking import (
    ApproveBookingRequest,
    ApproveBookingResponse,
    ApproveBookingUseCase,
    RejectBookingRequest,
    RejectBookingResponse,
    RejectBookingUseCase,
)
from venue.application.usecase.query import (
    ListByStatusRequest,
    ListByStatusResponse,
    ListByStatusUseCase,
)
from venue.domain.value import ListKind
from venue.interface.api.routes.common import calendar_token
from venue.interface.error import raise_for_error

router = APIRouter(prefix="/bookings", tags=["bookings"], route_class=DishkaRoute)


@router.get("", response_model=ListByStatusResponse)
async def list_bookings(
    list_by_status_use_case: FromDishka[ListByStatusUseCase],
    status_filter: str | None = Query(default=None, alias="status"),
) -> ListByStatusResponse:
    """List bookings, optionally filtered by status (pending, approved)."""
    response = await list_by_status_use_case.execute(
        ListByStatusRequest(kind=ListKind.BOOKINGS, status=status_filter)
    )
    raise_for_error(response)
    return response


@router.post("/{booking_id}/approve", response_model=ApproveBookingResponse)
async def approve_booking(
    booking_id: UUID,
    approve_booking_use_case: FromDishka[ApproveBookingUseCase],
    access_token: str | None = Depends(calendar_token),
) -> ApproveBookingResponse:
    """Approve a booking.

    Requires a calendar bearer credential. Calendar or cleanup failures after
    the booking and event are updated come back as warnings with 200.
    """
    response = await approve_booking_use_case.execute(
        ApproveBookingRequest(booking_id=booking_id, access_token=access_token)
    )
    raise_for_error(response)
    return response


@router.delete("/{booking_id}", response_model=RejectBookingResponse)
async def reject_booking(
    booking_id: UUID,
    reject_booking_use_case: FromDishka[RejectBookingUseCase],
) -> RejectBookingResponse:
    """Reject a booking; rejecting an absent booking succeeds."""
    response = await reject_booking_use_case.execute(
        RejectBookingRequest(booking_id=booking_id)
    )
    raise_for_error(response)
    return response
