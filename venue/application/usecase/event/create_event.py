"""Create event use case."""

import logfire
from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError
from venue.domain.model import Event
from venue.domain.service import EventService
from venue.domain.value import AdminId


class CreateEventRequest(BaseModel):
    """Create event request."""

    admin_id: str
    title: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    description: str = ""
    performer_email: str | None = None


class CreateEventResponse(UseCaseResponse):
    """Create event response."""

    event: Event | None = None


class CreateEventUseCase(BaseUseCase):
    """Use case for publishing a new performance slot."""

    def __init__(self, event_service: EventService) -> None:
        """Initialize create event use case.

        Args:
            event_service: Event domain service
        """
        self.event_service = event_service

    async def execute(self, request: CreateEventRequest) -> CreateEventResponse:
        """Create an event keyed by its date and start time.

        Args:
            request: Event details

        Returns:
            Response with the created event, or the failure
        """
        try:
            event = await self.event_service.create_event(
                admin_id=AdminId(request.admin_id),
                title=request.title,
                date=request.date,
                start_time=request.start_time,
                end_time=request.end_time,
                description=request.description,
                performer_email=request.performer_email,
            )
        except DomainError as e:
            logfire.info("Event not created", error=e.code.value, date=request.date)
            return CreateEventResponse(**self.failure(e))

        return CreateEventResponse(event=event)
