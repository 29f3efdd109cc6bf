"""Event catalog routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from venue.application.usecase.event import (
    CreateEventRequest,
    CreateEventResponse,
    CreateEventUseCase,
    DeleteEventRequest,
    DeleteEventResponse,
    DeleteEventUseCase,
    GetEventRequest,
    GetEventResponse,
    GetEventUseCase,
    UpdateEventRequest,
    UpdateEventResponse,
    UpdateEventUseCase,
)
from venue.application.usecase.invitation import (
    IssueInvitationRequest,
    IssueInvitationResponse,
    IssueInvitationUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from venue.application.usecase.query import (
    ListByStatusRequest,
    ListByStatusResponse,
    ListByStatusUseCase,
)
from venue.domain.value import ListKind
from venue.interface.api.routes.common import calendar_token
from venue.interface.error import raise_for_error

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)


class EventAPIRequest(BaseModel):
    """API request body for creating an event."""

    admin_id: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=200)
    date: str
    start_time: str
    end_time: str
    description: str = ""
    performer_email: str | None = None


class UpdateEventAPIRequest(BaseModel):
    """API request body for editing an event."""

    title: str = Field(min_length=1, max_length=200)
    date: str
    start_time: str
    end_time: str
    description: str = ""
    performer_email: str | None = None


class IssueInvitationAPIRequest(BaseModel):
    """API request body for issuing an invitation."""

    performer_contact: str | None = None


@router.post("", response_model=CreateEventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: EventAPIRequest,
    create_event_use_case: FromDishka[CreateEventUseCase],
) -> CreateEventResponse:
    """Publish a new performance slot.

    Returns:
        Created event

    Raises:
        HTTPException: 409 if the slot is taken, 400 on malformed fields
    """
    response = await create_event_use_case.execute(
        CreateEventRequest(**request.model_dump())
    )
    raise_for_error(response)
    return response


@router.get("", response_model=ListByStatusResponse)
async def list_events(
    list_by_status_use_case: FromDishka[ListByStatusUseCase],
    status_filter: str | None = Query(default=None, alias="status"),
) -> ListByStatusResponse:
    """List events, optionally filtered by status (pending, booked)."""
    response = await list_by_status_use_case.execute(
        ListByStatusRequest(kind=ListKind.EVENTS, status=status_filter)
    )
    raise_for_error(response)
    return response


@router.get("/{event_id}", response_model=GetEventResponse)
async def get_event(
    event_id: str,
    get_event_use_case: FromDishka[GetEventUseCase],
) -> GetEventResponse:
    """Get one event with 12-hour display times."""
    response = await get_event_use_case.execute(GetEventRequest(event_id=event_id))
    raise_for_error(response)
    return response


@router.put("/{event_id}", response_model=UpdateEventResponse)
async def update_event(
    event_id: str,
    request: UpdateEventAPIRequest,
    update_event_use_case: FromDishka[UpdateEventUseCase],
) -> UpdateEventResponse:
    """Edit an event.

    Changing the date or start time moves a pending event to a new id; the
    response carries the event under its new id.
    """
    response = await update_event_use_case.execute(
        UpdateEventRequest(event_id=event_id, **request.model_dump())
    )
    raise_for_error(response)
    return response


@router.delete("/{event_id}", response_model=DeleteEventResponse)
async def delete_event(
    event_id: str,
    delete_event_use_case: FromDishka[DeleteEventUseCase],
    access_token: str | None = Depends(calendar_token),
) -> DeleteEventResponse:
    """Delete an event and, when authorized, its calendar mirror."""
    response = await delete_event_use_case.execute(
        DeleteEventRequest(event_id=event_id, access_token=access_token)
    )
    raise_for_error(response)
    return response


@router.post(
    "/{event_id}/invitations",
    response_model=IssueInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def issue_invitation(
    event_id: str,
    request: IssueInvitationAPIRequest,
    issue_invitation_use_case: FromDishka[IssueInvitationUseCase],
) -> IssueInvitationResponse:
    """Issue a single-use signup link for the event."""
    response = await issue_invitation_use_case.execute(
        IssueInvitationRequest(
            event_id=event_id, performer_contact=request.performer_contact
        )
    )
    raise_for_error(response)
    return response


@router.get("/{event_id}/invitations", response_model=ListInvitationsResponse)
async def list_invitations(
    event_id: str,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
) -> ListInvitationsResponse:
    """List invitations issued for the event, newest first."""
    response = await list_invitations_use_case.execute(
        ListInvitationsRequest(event_id=event_id)
    )
    raise_for_error(response)
    return response
