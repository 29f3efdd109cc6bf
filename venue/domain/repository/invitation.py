"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from venue.domain.model.invitation import Invitation
from venue.domain.value import EventId, InvitationId, InvitationToken


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Invitations are insert-only apart from the claim flag and the event they
    follow when it is rescheduled.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID."""
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token.

        Used when a performer opens the signup link.
        """
        pass

    @abstractmethod
    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """Find all invitations issued for an event, newest first."""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            PersistenceError: If the write fails, including a key collision
        """
        pass

    @abstractmethod
    async def claim(self, invitation_id: InvitationId, claimed_at: datetime) -> bool:
        """Atomically flip ``claimed`` from false to true.

        This is a conditional write, not a read followed by a write: of two
        concurrent callers exactly one gets True.

        Returns:
            True if this call claimed the invitation, False if it was
            already claimed (or does not exist)
        """
        pass

    @abstractmethod
    async def move_to_event(self, old_event_id: EventId, new_event_id: EventId) -> int:
        """Re-point an event's invitations at a rescheduled event.

        Returns:
            Number of invitations moved

        Raises:
            PersistenceError: If the write fails
        """
        pass
