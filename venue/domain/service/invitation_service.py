"""Invitation domain service."""

import secrets
from datetime import datetime, timedelta

import logfire

from venue.domain.error import NotFoundError, ValidationError
from venue.domain.model import Invitation
from venue.domain.model.common import utcnow
from venue.domain.repository import EventRepository, InvitationRepository
from venue.domain.value import EventId, InvitationToken, invitation_key

from .base import Service


def generate_token() -> InvitationToken:
    """Fresh unguessable URL-safe token."""
    return InvitationToken(root=secrets.token_urlsafe(32))


class InvitationService(Service):
    """Domain service for issuing and looking up invitations."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        event_repository: EventRepository,
        ttl_seconds: int = 300,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            event_repository: Event repository
            ttl_seconds: Validity window of a new invitation
        """
        self.invitation_repository = invitation_repository
        self.event_repository = event_repository
        self.ttl = timedelta(seconds=ttl_seconds)

    async def issue(
        self,
        event_id: EventId,
        performer_contact: str | None = None,
        now: datetime | None = None,
    ) -> Invitation:
        """Issue a single-use invitation for an event.

        Several invitations may be outstanding for one event; only
        redemption is exclusive.

        Args:
            event_id: Event the performer may book
            performer_contact: Performer email; defaults to the event's
            now: Issuance time (defaults to the current time)

        Returns:
            Created invitation

        Raises:
            NotFoundError: If the event does not exist
            ValidationError: If no performer contact is available
        """
        with logfire.span("invitation_service.issue", event_id=event_id):
            event = await self.event_repository.find_by_id(event_id)
            if not event:
                logfire.warn("Invitation for unknown event", event_id=event_id)
                raise NotFoundError("Event", event_id)

            contact = (performer_contact or event.performer_email or "").strip()
            if not contact:
                raise ValidationError("A performer contact is required")

            issued_at = now or utcnow()
            invitation = Invitation(
                id=invitation_key(contact, issued_at),
                token=generate_token(),
                event_id=event_id,
                performer_email=contact,
                created_at=issued_at,
                expires_at=issued_at + self.ttl,
            )

            saved = await self.invitation_repository.create(invitation)
            logfire.info(
                "Invitation issued",
                invitation_id=saved.id,
                event_id=event_id,
                token=saved.token.masked,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def get_by_token(self, token: InvitationToken) -> Invitation | None:
        """Get invitation by token.

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span("invitation_service.get_by_token", token=token.masked):
            invitation = await self.invitation_repository.find_by_token(token)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=invitation.id,
                    claimed=invitation.claimed,
                )
            else:
                logfire.warn("Invitation not found", token=token.masked)
            return invitation

    async def list_for_event(self, event_id: EventId) -> list[Invitation]:
        """List invitations issued for an event, newest first."""
        return await self.invitation_repository.find_by_event(event_id)
