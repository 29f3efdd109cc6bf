"""PostgreSQL repository implementations."""

from venue.persistence.repository.booking import PostgresBookingRepository
from venue.persistence.repository.event import PostgresEventRepository
from venue.persistence.repository.invitation import PostgresInvitationRepository

__all__ = [
    "PostgresBookingRepository",
    "PostgresEventRepository",
    "PostgresInvitationRepository",
]
