"""Domain value types for venue booking.

Enumerations for lifecycle states and typed failure codes, plus the
invitation token wrapper.
"""

from enum import Enum

from pydantic import field_validator

from venue.domain.value.common import RootValueObject


class EventStatus(str, Enum):
    """Lifecycle of a performance slot.

    Only pending -> booked happens in the booking flow.
    """

    PENDING = "pending"
    BOOKED = "booked"


class BookingStatus(str, Enum):
    """Lifecycle of a performer's booking request.

    Rejected bookings are deleted rather than marked.
    """

    PENDING = "pending"
    APPROVED = "approved"


class ListKind(str, Enum):
    """Collections readable through the status query."""

    EVENTS = "events"
    BOOKINGS = "bookings"


class Period(str, Enum):
    """Half of the day in 12-hour notation."""

    AM = "AM"
    PM = "PM"


class ErrorCode(str, Enum):
    """Typed failure codes returned at the operation boundary."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    EVENT_ALREADY_EXISTS = "event_already_exists"
    EVENT_ALREADY_BOOKED = "event_already_booked"
    INVALID_TOKEN = "invalid_token"
    EXPIRED = "expired"
    ALREADY_CLAIMED = "already_claimed"
    CALENDAR_AUTH_REQUIRED = "calendar_auth_required"
    CONFIG_MISSING = "config_missing"
    AUTH_MISSING = "auth_missing"
    REMOTE_ERROR = "remote_error"
    PERSISTENCE_ERROR = "persistence_error"


class ApprovalStep(str, Enum):
    """Steps of the approval saga, in execution order."""

    APPROVE_BOOKING = "approve_booking"
    BOOK_EVENT = "book_event"
    SYNC_CALENDAR = "sync_calendar"
    REMOVE_COMPETING = "remove_competing"


class StepStatus(str, Enum):
    """Result of a single approval step."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class InvitationToken(RootValueObject[str]):
    """Opaque, URL-safe invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    @property
    def masked(self) -> str:
        """Token prefix safe to log."""
        return self.root[:8] + "..."
