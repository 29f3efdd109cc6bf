"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from venue.domain.model import Booking, Event, Invitation
from venue.domain.value import (
    AdminId,
    BookingId,
    BookingStatus,
    EventId,
    EventStatus,
    InvitationId,
    InvitationToken,
    PerformerId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model.

    Args:
        row: Database row as dict

    Returns:
        Event domain model
    """
    booked_booking_id = row.get("booked_booking_id")
    return Event(
        id=EventId(row["id"]),
        title=row["title"],
        date=row["date"],
        start_time=row["start_time"],
        end_time=row["end_time"],
        description=row.get("description") or "",
        performer_email=row.get("performer_email"),
        admin_id=AdminId(row["admin_id"]),
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
        calendar_event_id=row.get("calendar_event_id"),
        status=EventStatus(row["status"]),
        booked_performer_id=(
            PerformerId(row["booked_performer_id"])
            if row.get("booked_performer_id")
            else None
        ),
        booked_booking_id=(
            BookingId(_uuid(booked_booking_id)) if booked_booking_id else None
        ),
        booked_at=row.get("booked_at"),
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict.

    Args:
        event: Event domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = event.model_dump()
    data["status"] = event.status.value
    return data


def row_to_booking(row: Dict[str, Any]) -> Booking:
    """Convert database row to Booking domain model."""
    return Booking(
        id=BookingId(_uuid(row["id"])),
        event_id=EventId(row["event_id"]),
        performer_id=PerformerId(row["performer_id"]),
        performer_name=row["performer_name"],
        performer_email=row["performer_email"],
        event_title=row["event_title"],
        event_date=row["event_date"],
        event_start_time=row["event_start_time"],
        event_end_time=row["event_end_time"],
        notes=row.get("notes"),
        invitation_id=(
            InvitationId(row["invitation_id"]) if row.get("invitation_id") else None
        ),
        status=BookingStatus(row["status"]),
        created_at=row["created_at"],
        approved_at=row.get("approved_at"),
    )


def booking_to_dict(booking: Booking) -> Dict[str, Any]:
    """Convert Booking domain model to database dict."""
    data = booking.model_dump()
    data["status"] = booking.status.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    return Invitation(
        id=InvitationId(row["id"]),
        token=InvitationToken(root=row["token"]),
        event_id=EventId(row["event_id"]),
        performer_email=row["performer_email"],
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        claimed=row["claimed"],
        claimed_at=row.get("claimed_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    The token value object is serialized to its string by model_dump().
    """
    return invitation.model_dump()
