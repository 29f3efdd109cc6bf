"""Validate invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import (
    DomainError,
    InvalidTokenError,
    InvitationAlreadyClaimedError,
    InvitationExpiredError,
)
from venue.domain.model import Event
from venue.domain.model.common import utcnow
from venue.domain.service import EventService, InvitationService
from venue.domain.value import InvitationToken


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    token: str


class ValidateInvitationResponse(UseCaseResponse):
    """Validate invitation response."""

    valid: bool = False
    event: Event | None = None
    performer_email: str | None = None
    expires_at: datetime | None = None


class ValidateInvitationUseCase(BaseUseCase):
    """Use case for checking a signup link before showing the form.

    Applies the same checks as redemption, in the same order, without
    claiming anything.
    """

    def __init__(
        self, invitation_service: InvitationService, event_service: EventService
    ) -> None:
        """Initialize validate invitation use case.

        Args:
            invitation_service: Invitation domain service
            event_service: Event domain service
        """
        self.invitation_service = invitation_service
        self.event_service = event_service

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Validate an invitation token.

        Args:
            request: Validation request with token

        Returns:
            Response with the invited event, or why the link is unusable
        """
        try:
            token = InvitationToken(root=request.token)
        except ValueError:
            return ValidateInvitationResponse(**self.failure(InvalidTokenError()))

        with logfire.span("validate_invitation.execute", token=token.masked):
            try:
                invitation = await self.invitation_service.get_by_token(token)
                if not invitation:
                    raise InvalidTokenError()
                if invitation.is_expired(utcnow()):
                    raise InvitationExpiredError(invitation.id)
                if invitation.claimed:
                    raise InvitationAlreadyClaimedError(invitation.id)
                event = await self.event_service.get_event(invitation.event_id)
            except DomainError as e:
                return ValidateInvitationResponse(**self.failure(e))

            return ValidateInvitationResponse(
                valid=True,
                event=event,
                performer_email=invitation.performer_email,
                expires_at=invitation.expires_at,
                message="Valid invitation",
            )
