"""Domain services."""

from .approval_service import ApprovalService
from .base import Service
from .booking_service import BookingService
from .calendar_service import CalendarClient, CalendarService, month_window
from .event_service import EventService
from .invitation_service import InvitationService
from .query_service import QueryService

__all__ = [
    "ApprovalService",
    "BookingService",
    "CalendarClient",
    "CalendarService",
    "EventService",
    "InvitationService",
    "QueryService",
    "Service",
    "month_window",
]
