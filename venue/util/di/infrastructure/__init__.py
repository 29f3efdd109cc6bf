"""Infrastructure providers."""

# Import bases
from .bridge import CalendarBridgeProvider
from .calendar import CalendarProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .calendar import ProdCalendarProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CalendarBridgeProvider",
    "CalendarProvider",
    "PersistenceProvider",
    "ProdCalendarProvider",
    "ProdPersistenceProvider",
]
