"""List calendar window use case."""

from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.config import Settings
from venue.domain.error import DomainError
from venue.domain.model import CalendarEntry
from venue.domain.service import QueryService, month_window


class ListCalendarWindowRequest(BaseModel):
    """Month view request."""

    year: int = Field(ge=1970, le=9999)
    month: int = Field(ge=1, le=12)
    access_token: str | None = None


class ListCalendarWindowResponse(UseCaseResponse):
    """Month view response."""

    month_start: datetime | None = None
    month_end: datetime | None = None
    entries: list[CalendarEntry] = []


class ListCalendarWindowUseCase(BaseUseCase):
    """Use case for the calendar month view.

    The month is reckoned in the configured calendar zone.
    """

    def __init__(self, query_service: QueryService, settings: Settings) -> None:
        """Initialize list calendar window use case.

        Args:
            query_service: Query domain service
            settings: Application settings (calendar zone)
        """
        self.query_service = query_service
        self.settings = settings

    async def execute(
        self, request: ListCalendarWindowRequest
    ) -> ListCalendarWindowResponse:
        month_start, month_end = month_window(
            request.year, request.month, ZoneInfo(self.settings.calendar.time_zone)
        )
        try:
            entries = await self.query_service.list_calendar_window(
                month_start, month_end, request.access_token
            )
        except DomainError as e:
            return ListCalendarWindowResponse(
                month_start=month_start, month_end=month_end, **self.failure(e)
            )

        return ListCalendarWindowResponse(
            month_start=month_start, month_end=month_end, entries=entries
        )
