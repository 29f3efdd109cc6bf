"""Read-only query use cases."""

from .list_by_status import (
    ListByStatusRequest,
    ListByStatusResponse,
    ListByStatusUseCase,
)
from .list_calendar_window import (
    ListCalendarWindowRequest,
    ListCalendarWindowResponse,
    ListCalendarWindowUseCase,
)

__all__ = [
    "ListByStatusRequest",
    "ListByStatusResponse",
    "ListByStatusUseCase",
    "ListCalendarWindowRequest",
    "ListCalendarWindowResponse",
    "ListCalendarWindowUseCase",
]
