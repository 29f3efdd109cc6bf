"""Update event use case."""

from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError, PersistenceError
from venue.domain.model import Event
from venue.domain.service import EventService
from venue.domain.value import EventId


class UpdateEventRequest(BaseModel):
    """Update event request.

    Carries the full editable state. A new ``date`` or ``start_time`` moves
    the event to a new key.
    """

    event_id: str
    title: str
    date: str
    start_time: str
    end_time: str
    description: str = ""
    performer_email: str | None = None


class UpdateEventResponse(UseCaseResponse):
    """Update event response."""

    event: Event | None = None


class UpdateEventUseCase(BaseUseCase):
    """Use case for editing an event's details."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: UpdateEventRequest) -> UpdateEventResponse:
        """Edit or move the event.

        Raises:
            PersistenceError: If a write fails; the request transaction must
                roll back so a half-finished move is undone
        """
        try:
            event = await self.event_service.update_event(
                event_id=EventId(request.event_id),
                title=request.title,
                date=request.date,
                start_time=request.start_time,
                end_time=request.end_time,
                description=request.description,
                performer_email=request.performer_email,
            )
        except PersistenceError:
            raise
        except DomainError as e:
            return UpdateEventResponse(**self.failure(e))

        return UpdateEventResponse(event=event)
