"""Booking use cases."""

from .approve_booking import (
    ApproveBookingRequest,
    ApproveBookingResponse,
    ApproveBookingUseCase,
)
from .redeem_invitation import (
    RedeemInvitationRequest,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
)
from .reject_booking import (
    RejectBookingRequest,
    RejectBookingResponse,
    RejectBookingUseCase,
)

__all__ = [
    "ApproveBookingRequest",
    "ApproveBookingResponse",
    "ApproveBookingUseCase",
    "RedeemInvitationRequest",
    "RedeemInvitationResponse",
    "RedeemInvitationUseCase",
    "RejectBookingRequest",
    "RejectBookingResponse",
    "RejectBookingUseCase",
]
