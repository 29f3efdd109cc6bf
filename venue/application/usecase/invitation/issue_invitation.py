"""Issue invitation use case."""

from datetime import datetime
from urllib.parse import urlencode

import logfire
from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.config import Settings
from venue.domain.error import DomainError
from venue.domain.service import InvitationService
from venue.domain.value import EventId


class IssueInvitationRequest(BaseModel):
    """Issue invitation request."""

    event_id: str
    performer_contact: str | None = None  # Defaults to the event's contact


class IssueInvitationResponse(UseCaseResponse):
    """Issue invitation response."""

    invitation_id: str | None = None
    token: str | None = None
    link: str | None = None  # Full signup URL with token
    performer_email: str | None = None
    expires_at: datetime | None = None


class IssueInvitationUseCase(BaseUseCase):
    """Use case for generating a signup link for one performer."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        """Initialize issue invitation use case.

        Args:
            invitation_service: Invitation domain service
            settings: Application settings (signup link base)
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: IssueInvitationRequest
    ) -> IssueInvitationResponse:
        """Issue an invitation and build its signup link.

        Args:
            request: Event and optional performer contact

        Returns:
            Response with token and link, or the failure
        """
        try:
            invitation = await self.invitation_service.issue(
                EventId(request.event_id), request.performer_contact
            )
        except DomainError as e:
            logfire.info(
                "Invitation not issued", event_id=request.event_id, error=e.code.value
            )
            return IssueInvitationResponse(**self.failure(e))

        query = urlencode({"token": invitation.token.root})
        return IssueInvitationResponse(
            invitation_id=invitation.id,
            token=invitation.token.root,
            link=f"{self.settings.signup_base_url}/signup?{query}",
            performer_email=invitation.performer_email,
            expires_at=invitation.expires_at,
        )
