"""Get event use case."""

from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError
from venue.domain.model import Event
from venue.domain.service import EventService
from venue.domain.value import EventId, format_12_hour


class GetEventRequest(BaseModel):
    """Get event request."""

    event_id: str


class GetEventResponse(UseCaseResponse):
    """Get event response with 12-hour display times."""

    event: Event | None = None
    start_display: str = ""
    end_display: str = ""


class GetEventUseCase(BaseUseCase):
    """Use case for reading one event."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: GetEventRequest) -> GetEventResponse:
        try:
            event = await self.event_service.get_event(EventId(request.event_id))
        except DomainError as e:
            return GetEventResponse(**self.failure(e))

        return GetEventResponse(
            event=event,
            start_display=format_12_hour(event.start_time),
            end_display=format_12_hour(event.end_time),
        )
