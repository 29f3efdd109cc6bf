"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from venue.domain.error import PersistenceError
from venue.domain.model import Invitation
from venue.domain.repository import InvitationRepository
from venue.domain.value import EventId, InvitationId, InvitationToken


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, Invitation] = {}

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """List invitations for an event, newest first."""
        matches = [
            invitation
            for invitation in self._invitations.values()
            if invitation.event_id == event_id
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def create(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            PersistenceError: If the id or token is already taken
        """
        if invitation.id in self._invitations:
            raise PersistenceError(f"Invitation {invitation.id} already exists")
        if await self.find_by_token(invitation.token):
            raise PersistenceError("Invitation token already exists")
        self._invitations[invitation.id] = invitation
        return invitation

    async def claim(self, invitation_id: InvitationId, claimed_at: datetime) -> bool:
        """Mark an invitation claimed if it is still unclaimed.

        Check and write happen without an await between them, so concurrent
        claims on one event loop cannot both succeed.
        """
        invitation = self._invitations.get(invitation_id)
        if not invitation or invitation.claimed:
            return False
        self._invitations[invitation_id] = invitation.model_copy(
            update={"claimed": True, "claimed_at": claimed_at}
        )
        return True

    async def move_to_event(self, old_event_id: EventId, new_event_id: EventId) -> int:
        """Re-point invitations at a rescheduled event."""
        moved = 0
        for invitation_id, invitation in list(self._invitations.items()):
            if invitation.event_id == old_event_id:
                self._invitations[invitation_id] = invitation.model_copy(
                    update={"event_id": new_event_id}
                )
                moved += 1
        return moved
