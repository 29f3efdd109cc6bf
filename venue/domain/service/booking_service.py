"""Booking domain service.

Booking intake: a performer redeems an invitation and a pending booking is
recorded.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from venue.domain.error import (
    InvalidTokenError,
    InvitationAlreadyClaimedError,
    InvitationExpiredError,
    NotFoundError,
    ValidationError,
)
from venue.domain.model import Booking
from venue.domain.model.common import utcnow
from venue.domain.repository import (
    BookingRepository,
    EventRepository,
    InvitationRepository,
)
from venue.domain.value import (
    BookingId,
    BookingStatus,
    InvitationToken,
    performer_key,
)

from .base import Service


class BookingService(Service):
    """Domain service for booking intake and booking reads."""

    def __init__(
        self,
        booking_repository: BookingRepository,
        invitation_repository: InvitationRepository,
        event_repository: EventRepository,
    ) -> None:
        """Initialize booking service.

        Args:
            booking_repository: Booking repository
            invitation_repository: Invitation repository
            event_repository: Event repository
        """
        self.booking_repository = booking_repository
        self.invitation_repository = invitation_repository
        self.event_repository = event_repository

    async def redeem_invitation(
        self,
        token: InvitationToken,
        performer_name: str,
        performer_email: str | None = None,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> Booking:
        """Redeem an invitation into a pending booking.

        Checks run in order: unknown token, expiry, prior claim. The claim
        itself is a conditional write, so of two concurrent redemptions of
        one token only one creates a booking.

        The booking copies the event's title, date and time window as they
        are now.

        Args:
            token: Invitation token from the signup link
            performer_name: Performer (band) name
            performer_email: Performer email; defaults to the invited contact
            notes: Free-text notes for the administrator
            now: Redemption time (defaults to the current time)

        Returns:
            Created pending booking

        Raises:
            InvalidTokenError: If no invitation matches the token
            InvitationExpiredError: If the invitation has expired
            InvitationAlreadyClaimedError: If the invitation was already used
            NotFoundError: If the invited event no longer exists
            ValidationError: If the submission is incomplete
            PersistenceError: If the booking cannot be written
        """
        now = now or utcnow()

        with logfire.span("booking_service.redeem_invitation", token=token.masked):
            invitation = await self.invitation_repository.find_by_token(token)
            if not invitation:
                logfire.warn("Redemption with unknown token", token=token.masked)
                raise InvalidTokenError()

            if invitation.is_expired(now):
                logfire.info(
                    "Redemption of expired invitation",
                    invitation_id=invitation.id,
                    expires_at=invitation.expires_at.isoformat(),
                )
                raise InvitationExpiredError(invitation.id)

            if invitation.claimed:
                logfire.info(
                    "Redemption of claimed invitation", invitation_id=invitation.id
                )
                raise InvitationAlreadyClaimedError(invitation.id)

            event = await self.event_repository.find_by_id(invitation.event_id)
            if not event:
                logfire.warn(
                    "Invitation for deleted event",
                    invitation_id=invitation.id,
                    event_id=invitation.event_id,
                )
                raise NotFoundError("Event", invitation.event_id)

            email = (performer_email or invitation.performer_email).strip()
            try:
                booking = Booking(
                    id=BookingId(uuid4()),
                    event_id=event.id,
                    performer_id=performer_key(email),
                    performer_name=performer_name.strip(),
                    performer_email=email,
                    event_title=event.title,
                    event_date=event.date,
                    event_start_time=event.start_time,
                    event_end_time=event.end_time,
                    notes=notes or None,
                    invitation_id=invitation.id,
                    status=BookingStatus.PENDING,
                    created_at=now,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            # Serialization point: losing racers stop here
            if not await self.invitation_repository.claim(invitation.id, now):
                logfire.warn(
                    "Lost redemption race", invitation_id=invitation.id
                )
                raise InvitationAlreadyClaimedError(invitation.id)

            saved = await self.booking_repository.create(booking)
            logfire.info(
                "Booking submitted",
                booking_id=str(saved.id),
                event_id=saved.event_id,
                invitation_id=invitation.id,
            )
            return saved

    async def get_booking(self, booking_id: BookingId) -> Booking:
        """Get a booking by id.

        Raises:
            NotFoundError: If the booking does not exist
        """
        booking = await self.booking_repository.find_by_id(booking_id)
        if not booking:
            raise NotFoundError("Booking", str(booking_id))
        return booking
