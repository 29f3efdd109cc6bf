"""List by status use case."""

from pydantic import BaseModel

from venue.application.usecase.base import BaseUseCase, UseCaseResponse
from venue.domain.error import DomainError
from venue.domain.model import Booking, Event
from venue.domain.service import QueryService
from venue.domain.value import ErrorCode, ListKind


class ListByStatusRequest(BaseModel):
    """List by status request."""

    kind: ListKind
    status: str | None = None  # None lists everything


class ListByStatusResponse(UseCaseResponse):
    """List by status response; only the requested collection is filled."""

    kind: ListKind
    events: list[Event] = []
    bookings: list[Booking] = []


class ListByStatusUseCase(BaseUseCase):
    """Use case for the administrator's event and booking lists."""

    def __init__(self, query_service: QueryService) -> None:
        self.query_service = query_service

    async def execute(self, request: ListByStatusRequest) -> ListByStatusResponse:
        try:
            items = await self.query_service.list_by_status(
                request.kind, request.status
            )
        except ValueError:
            return ListByStatusResponse(
                kind=request.kind,
                error=ErrorCode.VALIDATION,
                message=f"Unknown {request.kind.value} status: {request.status}",
            )
        except DomainError as e:
            return ListByStatusResponse(kind=request.kind, **self.failure(e))

        if request.kind == ListKind.EVENTS:
            return ListByStatusResponse(kind=request.kind, events=items)
        return ListByStatusResponse(kind=request.kind, bookings=items)
