"""Mock providers for testing."""

from .calendar import MockCalendarProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCalendarProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
