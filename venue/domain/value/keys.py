"""Deterministic document keys.

Event keys: ``{date}_{HHMM}`` from the slot's date and start time, so two
events can never occupy the same instant. Creating an event whose key is
already taken is refused; updating an event rewrites the same key.

Invitation keys: ``{sanitized contact}_{epoch millis}`` of issuance. They
only avoid collisions between invitations, the token is the secret.
Invitations are insert-only, so a collision (same contact, same
millisecond) is reported as a persistence failure rather than overwriting.

Performer keys: the sanitized email, used as the performer id bound to a
booking and to the event it books.
"""

import re
from datetime import datetime

from venue.domain.value.clock import is_time_24h
from venue.domain.value.identifiers import EventId, InvitationId, PerformerId

_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def sanitize_contact(contact: str) -> str:
    """Lowercase a contact and replace ``@`` and ``.`` with underscores."""
    return re.sub(r"[@.]", "_", contact.strip().lower())


def event_key(date: str, start_time: str) -> EventId:
    """Key for the event starting at ``start_time`` on ``date``.

    Raises:
        ValueError: If the date is not ``YYYY-MM-DD`` or the time not ``HH:MM``
    """
    if not _DATE.match(date):
        raise ValueError(f"Date must be YYYY-MM-DD, got {date!r}")
    if not is_time_24h(start_time):
        raise ValueError(f"Start time must be HH:MM, got {start_time!r}")
    hours, minutes = start_time.split(":")
    return EventId(f"{date}_{int(hours):02d}{minutes}")


def invitation_key(contact: str, issued_at: datetime) -> InvitationId:
    """Key for an invitation issued to ``contact`` at ``issued_at``."""
    millis = int(issued_at.timestamp()) * 1000 + issued_at.microsecond // 1000
    return InvitationId(f"{sanitize_contact(contact)}_{millis}")


def performer_key(email: str) -> PerformerId:
    """Performer id derived from the performer's email."""
    return PerformerId(sanitize_contact(email))
