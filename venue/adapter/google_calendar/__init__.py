"""Google Calendar adapter."""

from .client import (
    GoogleCalendarClient,
    MockGoogleCalendarClient,
    RealGoogleCalendarClient,
)

__all__ = [
    "GoogleCalendarClient",
    "MockGoogleCalendarClient",
    "RealGoogleCalendarClient",
]
