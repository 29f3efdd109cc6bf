"""List invitations use case."""

from datetime import datetime

from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError
from venue.domain.model.common import utcnow
from venue.domain.service import InvitationService
from venue.domain.value import EventId


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    event_id: str


class InvitationItem(BaseModel):
    """Invitation as shown to the administrator; the token is masked."""

    invitation_id: str
    performer_email: str
    token_hint: str
    created_at: datetime
    expires_at: datetime
    expired: bool
    claimed: bool
    claimed_at: datetime | None


class ListInvitationsResponse(UseCaseResponse):
    """List invitations response."""

    invitations: list[InvitationItem] = []


class ListInvitationsUseCase(BaseUseCase):
    """Use case for reviewing the invitations sent for an event."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: ListInvitationsRequest
    ) -> ListInvitationsResponse:
        try:
            invitations = await self.invitation_service.list_for_event(
                EventId(request.event_id)
            )
        except DomainError as e:
            return ListInvitationsResponse(**self.failure(e))

        now = utcnow()
        return ListInvitationsResponse(
            invitations=[
                InvitationItem(
                    invitation_id=invitation.id,
                    performer_email=invitation.performer_email,
                    token_hint=invitation.token.masked,
                    created_at=invitation.created_at,
                    expires_at=invitation.expires_at,
                    expired=invitation.is_expired(now),
                    claimed=invitation.claimed,
                    claimed_at=invitation.claimed_at,
                )
                for invitation in invitations
            ]
        )
