"""Booking entity.

A performer's request to fill an event, created by redeeming an invitation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from venue.domain.model.common import DomainModel, utcnow
from venue.domain.value import (
    BookingId,
    BookingStatus,
    EventId,
    InvitationId,
    PerformerId,
)


class Booking(DomainModel):
    """Booking entity.

    The event's title, date and time window are copied in at submission so
    later edits to the event do not change what the performer asked for.

    Business rules:
    - At most one approved booking per event
    - Approving one booking removes the other pending bookings for the event
    - Rejection deletes the booking
    """

    id: BookingId
    event_id: EventId
    performer_id: PerformerId
    performer_name: str = Field(min_length=1, max_length=200)
    performer_email: str
    event_title: str
    event_date: str
    event_start_time: str
    event_end_time: str
    notes: Optional[str] = None
    invitation_id: Optional[InvitationId] = None
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    approved_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.status == BookingStatus.PENDING
