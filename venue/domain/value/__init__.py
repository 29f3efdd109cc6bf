"""Domain value objects for venue booking."""

from venue.domain.value.clock import (
    TwelveHourTime,
    format_12_hour,
    to_12_hour,
    to_24_hour,
)
from venue.domain.value.identifiers import (
    AdminId,
    BookingId,
    EventId,
    InvitationId,
    PerformerId,
)
from venue.domain.value.keys import (
    event_key,
    invitation_key,
    performer_key,
    sanitize_contact,
)
from venue.domain.value.types import (
    ApprovalStep,
    BookingStatus,
    ErrorCode,
    EventStatus,
    InvitationToken,
    ListKind,
    Period,
    StepStatus,
)

__all__ = [
    # Identifiers
    "AdminId",
    "BookingId",
    "EventId",
    "InvitationId",
    "PerformerId",
    # Types
    "ApprovalStep",
    "BookingStatus",
    "ErrorCode",
    "EventStatus",
    "InvitationToken",
    "ListKind",
    "Period",
    "StepStatus",
    # Time codec
    "TwelveHourTime",
    "format_12_hour",
    "to_12_hour",
    "to_24_hour",
    # Keys
    "event_key",
    "invitation_key",
    "performer_key",
    "sanitize_contact",
]
