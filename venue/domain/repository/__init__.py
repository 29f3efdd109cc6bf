"""Repository interfaces for the venue booking domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from venue.domain.repository.booking import BookingRepository
from venue.domain.repository.event import EventRepository
from venue.domain.repository.invitation import InvitationRepository

__all__ = [
    "BookingRepository",
    "EventRepository",
    "InvitationRepository",
]
