"""Google Calendar client implementation.

Talks to the Calendar v3 REST API with a caller-supplied OAuth bearer token.
Listing may fall back to a static API key for public calendars.
"""

from datetime import date, datetime, timedelta
from urllib.parse import quote

import httpx
import logfire

from venue.domain.error import (
    CalendarAuthMissingError,
    CalendarConfigMissingError,
    CalendarRemoteError,
)
from venue.domain.model import Booking, RemoteCalendarEvent
from venue.domain.service.calendar_service import CalendarClient


def _event_description(booking: Booking) -> str:
    lines = []
    if booking.notes:
        lines.append(f"Notes: {booking.notes}")
    lines.append(f"Performer: {booking.performer_name}")
    lines.append(f"Email: {booking.performer_email}")
    return "\n".join(lines)


def _slot_bounds(booking: Booking) -> tuple[str, str]:
    """Local start/end timestamps; an end at or before the start rolls to the next day."""
    start = f"{booking.event_date}T{booking.event_start_time}:00"
    end_date = booking.event_date
    if booking.event_end_time <= booking.event_start_time:
        end_date = (date.fromisoformat(booking.event_date) + timedelta(days=1)).isoformat()
    return start, f"{end_date}T{booking.event_end_time}:00"


def _json_body(response: httpx.Response) -> dict:
    """Decode a success body, which Google always sends as a JSON object."""
    try:
        data = response.json()
    except ValueError as e:
        raise CalendarRemoteError(
            "Google Calendar returned a malformed response", response.status_code
        ) from e
    if not isinstance(data, dict):
        raise CalendarRemoteError(
            "Google Calendar returned a malformed response", response.status_code
        )
    return data


def _error_message(response: httpx.Response, default: str) -> str:
    """Pull ``error.message`` out of a Google API error body."""
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return default


class GoogleCalendarClient(CalendarClient):
    """Base class for Google Calendar clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleCalendarClient(GoogleCalendarClient):
    """Google Calendar v3 client over httpx."""

    def __init__(
        self,
        calendar_id: str | None,
        time_zone: str,
        api_key: str | None = None,
        api_base_url: str = "https://www.googleapis.com/calendar/v3",
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize Google Calendar client.

        Args:
            calendar_id: Target calendar; calls fail with a config error if unset
            time_zone: IANA zone attached to every start/end timestamp
            api_key: Optional key for read-only listing without a token
            api_base_url: Calendar API root
            timeout_seconds: Per-request timeout
        """
        self.calendar_id = calendar_id
        self.time_zone = time_zone
        self.api_key = api_key
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    def _events_url(self) -> str:
        if not self.calendar_id:
            raise CalendarConfigMissingError()
        return f"{self.api_base_url}/calendars/{quote(self.calendar_id, safe='')}/events"

    def _event_body(self, booking: Booking) -> dict:
        start, end = _slot_bounds(booking)
        return {
            "summary": booking.event_title,
            "description": _event_description(booking),
            "start": {
                "dateTime": start,
                "timeZone": self.time_zone,
            },
            "end": {
                "dateTime": end,
                "timeZone": self.time_zone,
            },
        }

    async def create_event(self, booking: Booking, access_token: str | None) -> str:
        """Create a calendar event for an approved booking.

        Args:
            booking: Booking whose event details are mirrored
            access_token: Bearer token with calendar write scope

        Returns:
            Google's id for the created event

        Raises:
            CalendarConfigMissingError: If no calendar id is configured
            CalendarAuthMissingError: If no token was supplied
            CalendarRemoteError: If Google rejects the request or is unreachable
        """
        url = self._events_url()
        if not access_token:
            raise CalendarAuthMissingError()

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    json=self._event_body(booking),
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout_seconds,
                )

                if response.status_code not in (200, 201):
                    message = _error_message(
                        response, "Failed to create Google Calendar event"
                    )
                    logfire.error(
                        "Google Calendar create failed",
                        status_code=response.status_code,
                        booking_id=str(booking.id),
                        error=message,
                    )
                    raise CalendarRemoteError(message, response.status_code)

                data = _json_body(response)
                calendar_event_id = data.get("id")
                if not calendar_event_id or not isinstance(calendar_event_id, str):
                    raise CalendarRemoteError("Google Calendar returned no event id")

                return calendar_event_id

        except httpx.HTTPError as e:
            logfire.error(
                "Google Calendar create HTTP error",
                booking_id=str(booking.id),
                error=str(e),
            )
            raise CalendarRemoteError(f"Google Calendar unreachable: {e}") from e

    async def delete_event(
        self, calendar_event_id: str, access_token: str | None
    ) -> bool:
        """Delete a calendar event; failures are logged, never raised."""
        if not self.calendar_id or not access_token:
            logfire.warn(
                "Google Calendar delete skipped",
                calendar_event_id=calendar_event_id,
                configured=bool(self.calendar_id),
            )
            return False

        url = f"{self._events_url()}/{quote(calendar_event_id, safe='')}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.delete(
                    url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.warn(
                "Google Calendar delete HTTP error",
                calendar_event_id=calendar_event_id,
                error=str(e),
            )
            return False

        # 410 means it was already deleted
        if response.status_code in (200, 204, 410):
            return True

        logfire.warn(
            "Google Calendar delete failed",
            calendar_event_id=calendar_event_id,
            status_code=response.status_code,
        )
        return False

    async def list_events(
        self, time_min: datetime, time_max: datetime, access_token: str | None
    ) -> list[RemoteCalendarEvent]:
        """List expanded single events in a window, ordered by start time.

        Raises:
            CalendarConfigMissingError: If no calendar id is configured
            CalendarAuthMissingError: If neither a token nor an API key is set
            CalendarRemoteError: If Google rejects the request or is unreachable
        """
        url = self._events_url()
        if not access_token and not self.api_key:
            raise CalendarAuthMissingError()

        params = {
            "timeMin": time_min.isoformat(),
            "timeMax": time_max.isoformat(),
            "singleEvents": "true",
            "orderBy": "startTime",
        }
        if self.api_key:
            params["key"] = self.api_key

        headers = {}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=self.timeout_seconds,
                )

                if response.status_code != 200:
                    message = _error_message(
                        response, "Failed to fetch Google Calendar events"
                    )
                    logfire.error(
                        "Google Calendar list failed",
                        status_code=response.status_code,
                        error=message,
                    )
                    raise CalendarRemoteError(message, response.status_code)

                data = _json_body(response)

        except httpx.HTTPError as e:
            logfire.error("Google Calendar list HTTP error", error=str(e))
            raise CalendarRemoteError(f"Google Calendar unreachable: {e}") from e

        try:
            return [
                RemoteCalendarEvent(
                    id=item["id"],
                    summary=item.get("summary"),
                    start=item.get("start") or {},
                    end=item.get("end") or {},
                )
                for item in data.get("items") or []
                if item.get("id")
            ]
        except (AttributeError, TypeError, ValueError) as e:
            logfire.error("Google Calendar list malformed", error=str(e))
            raise CalendarRemoteError(
                "Google Calendar returned malformed events", response.status_code
            ) from e


class MockGoogleCalendarClient(GoogleCalendarClient):
    """In-memory calendar for development and tests.

    Created events are kept in ``events`` and are returned by ``list_events``
    alongside anything placed in ``external_events``. Set ``fail_create`` or
    ``fail_delete`` to simulate an unavailable calendar.
    """

    def __init__(self, time_zone: str = "America/Chicago") -> None:
        self.time_zone = time_zone
        self.events: dict[str, RemoteCalendarEvent] = {}
        self.external_events: list[RemoteCalendarEvent] = []
        self.deleted: list[str] = []
        self.fail_create: Exception | None = None
        self.fail_delete = False
        self._counter = 0

    async def create_event(self, booking: Booking, access_token: str | None) -> str:
        if not access_token:
            raise CalendarAuthMissingError()
        if self.fail_create is not None:
            raise self.fail_create

        self._counter += 1
        calendar_event_id = f"mock-gcal-{self._counter}"
        start, end = _slot_bounds(booking)
        self.events[calendar_event_id] = RemoteCalendarEvent(
            id=calendar_event_id,
            summary=booking.event_title,
            start={
                "dateTime": start,
                "timeZone": self.time_zone,
            },
            end={
                "dateTime": end,
                "timeZone": self.time_zone,
            },
        )
        logfire.info(
            "Mock calendar event created",
            calendar_event_id=calendar_event_id,
            booking_id=str(booking.id),
        )
        return calendar_event_id

    async def delete_event(
        self, calendar_event_id: str, access_token: str | None
    ) -> bool:
        if self.fail_delete or not access_token:
            return False
        self.events.pop(calendar_event_id, None)
        self.deleted.append(calendar_event_id)
        return True

    async def list_events(
        self, time_min: datetime, time_max: datetime, access_token: str | None
    ) -> list[RemoteCalendarEvent]:
        return [*self.events.values(), *self.external_events]
