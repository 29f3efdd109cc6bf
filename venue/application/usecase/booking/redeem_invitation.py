"""Redeem invitation use case."""

import logfire
from pydantic import BaseModel, Field

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError, InvalidTokenError, PersistenceError
from venue.domain.model import Booking
from venue.domain.service import BookingService
from venue.domain.value import InvitationToken


class RedeemInvitationRequest(BaseModel):
    """Performer signup submitted through an invitation link."""

    token: str
    performer_name: str = Field(min_length=1, max_length=200)
    performer_email: str | None = None
    notes: str | None = Field(default=None, max_length=5000)


class RedeemInvitationResponse(UseCaseResponse):
    """Redeem invitation response."""

    booking: Booking | None = None


class RedeemInvitationUseCase(BaseUseCase):
    """Use case for turning an invitation into a pending booking."""

    def __init__(self, booking_service: BookingService) -> None:
        """Initialize redeem invitation use case.

        Args:
            booking_service: Booking domain service
        """
        self.booking_service = booking_service

    async def execute(
        self, request: RedeemInvitationRequest
    ) -> RedeemInvitationResponse:
        """Redeem an invitation.

        Args:
            request: Signup submission

        Returns:
            Response with the pending booking, or why the link was refused

        Raises:
            PersistenceError: If the claim or booking write fails; the
                request transaction must roll back so the claim is undone
        """
        try:
            token = InvitationToken(root=request.token)
        except ValueError:
            return RedeemInvitationResponse(**self.failure(InvalidTokenError()))

        try:
            booking = await self.booking_service.redeem_invitation(
                token,
                performer_name=request.performer_name,
                performer_email=request.performer_email,
                notes=request.notes,
            )
        except PersistenceError:
            raise
        except DomainError as e:
            logfire.info("Redemption refused", error=e.code.value, token=token.masked)
            return RedeemInvitationResponse(**self.failure(e))

        return RedeemInvitationResponse(booking=booking)
