"""Invitation entity.

Invitations are single-use, short-lived capabilities that let one performer
submit one booking for one event. They are never deleted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from venue.domain.model.common import DomainModel, utcnow
from venue.domain.value import EventId, InvitationId, InvitationToken


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Redeemable exactly once, and only until ``expires_at``
    - ``claimed`` is the only gate and is never reset
    - Several invitations may be outstanding for the same event
    """

    id: InvitationId
    token: InvitationToken
    event_id: EventId
    performer_email: str
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime
    claimed: bool = False
    claimed_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """Whether ``now`` is past the expiry instant."""
        return now > self.expires_at
