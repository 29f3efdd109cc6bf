"""In-memory repository implementations for testing."""

from .booking import InMemoryBookingRepository
from .event import InMemoryEventRepository
from .invitation import InMemoryInvitationRepository

__all__ = [
    "InMemoryBookingRepository",
    "InMemoryEventRepository",
    "InMemoryInvitationRepository",
]
