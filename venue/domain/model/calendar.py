"""Calendar entries read from the external calendar."""

from datetime import datetime
from typing import Optional

from venue.domain.model.common import DomainModel


class RemoteCalendarEvent(DomainModel):
    """An event as listed by the external calendar.

    ``start``/``end`` hold ``dateTime`` for timed events and ``date`` for
    all-day ones, as returned by the calendar API.
    """

    id: str
    summary: Optional[str] = None
    start: dict[str, str] = {}
    end: dict[str, str] = {}


class CalendarEntry(DomainModel):
    """Calendar entry prepared for the month view.

    ``is_admin`` marks entries created by approving a booking here, as
    opposed to entries added directly in the calendar.
    """

    id: str
    title: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    all_day: bool = False
    is_admin: bool = False
