"""Strongly typed identifiers for venue booking entities.

Event and invitation ids are derived keys (see ``venue.domain.value.keys``);
booking ids are random UUIDs.
"""

from typing import NewType
from uuid import UUID

EventId = NewType("EventId", str)
InvitationId = NewType("InvitationId", str)
BookingId = NewType("BookingId", UUID)

# Ids owned by the external identity provider
AdminId = NewType("AdminId", str)
PerformerId = NewType("PerformerId", str)
