"""Test configuration and fixtures."""

from datetime import datetime, timezone

from venue.domain.model import Event
from venue.domain.value import AdminId, EventId, event_key

# Fixed issuance instant used across invitation tests
T0 = datetime(2024, 4, 20, 18, 0, tzinfo=timezone.utc)


def make_event(
    date: str = "2024-05-01",
    start_time: str = "19:00",
    end_time: str = "21:00",
    title: str = "Friday Night Jazz",
    performer_email: str | None = "band@x.com",
    **overrides,
) -> Event:
    """Helper building a pending event keyed by date and start time.

    Args:
        date: Event date (YYYY-MM-DD)
        start_time: Start time (HH:MM)
        end_time: End time (HH:MM)
        title: Event title
        performer_email: Default invitation contact
        **overrides: Any other Event field

    Returns:
        Unsaved Event
    """
    fields = {
        "id": EventId(event_key(date, start_time)),
        "title": title,
        "date": date,
        "start_time": start_time,
        "end_time": end_time,
        "performer_email": performer_email,
        "admin_id": AdminId("admin-1"),
        "created_at": T0,
    }
    fields.update(overrides)
    return Event(**fields)
