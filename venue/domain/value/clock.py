"""Conversion between 24-hour storage times and 12-hour display times.

Times are stored as ``HH:MM`` (24-hour). The dashboard shows and edits them
as an hour 1-12, a minute and an AM/PM period.
"""

import re

from venue.domain.value.common import ValueObject
from venue.domain.value.types import Period

_TIME_24H = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

# Minutes offered by the event form
QUARTER_HOURS = ("00", "15", "30", "45")


class TwelveHourTime(ValueObject):
    """A time of day split for 12-hour display."""

    hour: int
    minute: str
    period: Period

    def __str__(self) -> str:
        return f"{self.hour}:{self.minute} {self.period.value}"


def is_time_24h(value: str) -> bool:
    """Whether ``value`` is a valid ``HH:MM`` 24-hour time."""
    return bool(value) and _TIME_24H.match(value) is not None


def to_12_hour(time24: str) -> TwelveHourTime | None:
    """Split a 24-hour ``HH:MM`` time into hour, minute and period.

    Hour 0 becomes 12 AM, hour 12 becomes 12 PM, 13-23 become 1-11 PM.

    Returns:
        The 12-hour form, or None when the input is not a valid time
    """
    if not time24:
        return None
    match = _TIME_24H.match(time24)
    if match is None:
        return None

    hour = int(match.group(1))
    minute = match.group(2)
    period = Period.PM if hour >= 12 else Period.AM
    if hour == 0:
        hour12 = 12
    elif hour > 12:
        hour12 = hour - 12
    else:
        hour12 = hour
    return TwelveHourTime(hour=hour12, minute=minute, period=period)


def to_24_hour(hour: int | str, minute: str, period: Period | str) -> str:
    """Join a 12-hour hour, minute and period into ``HH:MM``.

    Raises:
        ValueError: If the hour is outside 1-12 or the minute is not two digits
    """
    hour24 = int(hour)
    if not 1 <= hour24 <= 12:
        raise ValueError(f"Hour must be 1-12, got {hour}")
    if not re.match(r"^[0-5]\d$", str(minute)):
        raise ValueError(f"Minute must be two digits 00-59, got {minute}")

    period = Period(period)
    if period == Period.PM and hour24 != 12:
        hour24 += 12
    if period == Period.AM and hour24 == 12:
        hour24 = 0
    return f"{hour24:02d}:{minute}"


def format_12_hour(time24: str | None) -> str:
    """Display form of a stored time, e.g. ``"19:00"`` -> ``"7:00 PM"``.

    Malformed or empty input gives an empty string.
    """
    parsed = to_12_hour(time24 or "")
    return str(parsed) if parsed else ""
