"""Domain model entities for venue booking."""

from venue.domain.model.approval import ApprovalOutcome, RejectOutcome, StepResult
from venue.domain.model.booking import Booking
from venue.domain.model.calendar import CalendarEntry, RemoteCalendarEvent
from venue.domain.model.event import Event
from venue.domain.model.invitation import Invitation

__all__ = [
    "ApprovalOutcome",
    "Booking",
    "CalendarEntry",
    "Event",
    "Invitation",
    "RejectOutcome",
    "RemoteCalendarEvent",
    "StepResult",
]
