"""Calendar month view route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from venue.application.usecase.query import (
    ListCalendarWindowRequest,
    ListCalendarWindowResponse,
    ListCalendarWindowUseCase,
)
from venue.interface.api.routes.common import calendar_token
from venue.interface.error import raise_for_error

router = APIRouter(prefix="/calendar", tags=["calendar"], route_class=DishkaRoute)


@router.get("", response_model=ListCalendarWindowResponse)
async def list_calendar_window(
    list_calendar_window_use_case: FromDishka[ListCalendarWindowUseCase],
    year: int = Query(ge=1970, le=9999),
    month: int = Query(ge=1, le=12),
    access_token: str | None = Depends(calendar_token),
) -> ListCalendarWindowResponse:
    """Calendar entries for one month, split into ours and external.

    Uses the bearer credential when present, else the configured API key.
    """
    response = await list_calendar_window_use_case.execute(
        ListCalendarWindowRequest(year=year, month=month, access_token=access_token)
    )
    raise_for_error(response)
    return response
