"""Event entity.

An event is a single performance slot published by an administrator.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from venue.domain.model.common import DomainModel, utcnow
from venue.domain.value import (
    AdminId,
    BookingId,
    EventId,
    EventStatus,
    PerformerId,
)
from venue.domain.value.clock import is_time_24h


class Event(DomainModel):
    """Event entity - one bookable slot.

    Business rules:
    - The id is derived from date and start time (one event per instant)
    - ``calendar_event_id`` is set at most once, when the booking is mirrored
    - Status only moves pending -> booked
    - A booked event names the performer and the booking holding it
    """

    id: EventId
    title: str = Field(min_length=1, max_length=200)
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")  # YYYY-MM-DD
    start_time: str  # HH:MM, 24-hour
    end_time: str  # HH:MM, 24-hour
    description: str = ""
    performer_email: Optional[str] = None  # Default invitation contact
    admin_id: AdminId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
    calendar_event_id: Optional[str] = None
    status: EventStatus = EventStatus.PENDING
    booked_performer_id: Optional[PerformerId] = None
    booked_booking_id: Optional[BookingId] = None
    booked_at: Optional[datetime] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Validate 24-hour HH:MM format."""
        if len(v) != 5 or not is_time_24h(v):
            raise ValueError("Time must be HH:MM (24-hour)")
        return v

    @property
    def is_booked(self) -> bool:
        """Whether a booking holds this slot."""
        return self.status == EventStatus.BOOKED
