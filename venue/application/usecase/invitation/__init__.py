"""Invitation use cases."""

from .issue_invitation import (
    IssueInvitationRequest,
    IssueInvitationResponse,
    IssueInvitationUseCase,
)
from .list_invitations import (
    InvitationItem,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from .validate_invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)

__all__ = [
    "InvitationItem",
    "IssueInvitationRequest",
    "IssueInvitationResponse",
    "IssueInvitationUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "ValidateInvitationRequest",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
]
