"""Delete event use case."""

from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError
from venue.domain.service import EventService
from venue.domain.value import EventId


class DeleteEventRequest(BaseModel):
    """Delete event request."""

    event_id: str
    access_token: str | None = None  # Calendar credential, for the mirror


class DeleteEventResponse(UseCaseResponse):
    """Delete event response."""

    event_id: str
    deleted: bool = False


class DeleteEventUseCase(BaseUseCase):
    """Use case for deleting an event and its calendar mirror.

    Deleting an absent event is not an error.
    """

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: DeleteEventRequest) -> DeleteEventResponse:
        try:
            deleted = await self.event_service.delete_event(
                EventId(request.event_id), request.access_token
            )
        except DomainError as e:
            return DeleteEventResponse(event_id=request.event_id, **self.failure(e))

        return DeleteEventResponse(event_id=request.event_id, deleted=deleted)
