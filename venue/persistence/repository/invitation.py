"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from venue.domain.error import PersistenceError
from venue.domain.model import Invitation
from venue.domain.repository import InvitationRepository
from venue.domain.value import EventId, InvitationId, InvitationToken
from venue.persistence.mappers import invitation_to_dict, row_to_invitation
from venue.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _first(self, stmt, what: str) -> Optional[Invitation]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read {what}") from e
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        return await self._first(stmt, f"invitation {invitation_id}")

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token.

        Args:
            token: Token from the signup link

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(
            invitations_table.c.token == token.root
        )
        return await self._first(stmt, "invitation by token")

    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """List invitations for an event, newest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.event_id == event_id)
            .order_by(invitations_table.c.created_at.desc())
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to list invitations for {event_id}") from e
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def create(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            PersistenceError: If the write fails, including an id or token
                collision
        """
        stmt = insert(invitations_table).values(**invitation_to_dict(invitation))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to create invitation {invitation.id}"
            ) from e
        return invitation

    async def claim(self, invitation_id: InvitationId, claimed_at: datetime) -> bool:
        """Mark an invitation claimed if it is still unclaimed.

        The ``claimed = false`` predicate is evaluated by the UPDATE itself,
        so of two concurrent claims only one matches a row.

        Returns:
            True if this call claimed the invitation
        """
        stmt = (
            update(invitations_table)
            .where(
                invitations_table.c.id == invitation_id,
                invitations_table.c.claimed.is_(False),
            )
            .values(claimed=True, claimed_at=claimed_at)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to claim invitation {invitation_id}") from e
        return result.rowcount > 0

    async def move_to_event(self, old_event_id: EventId, new_event_id: EventId) -> int:
        """Re-point invitations at a rescheduled event."""
        stmt = (
            update(invitations_table)
            .where(invitations_table.c.event_id == old_event_id)
            .values(event_id=new_event_id)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to move invitations from {old_event_id} to {new_event_id}"
            ) from e
        return result.rowcount
