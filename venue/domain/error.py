"""Domain layer errors.

Each error carries an ``ErrorCode`` so use cases can turn it into a typed
response at the operation boundary.
"""

from venue.domain.value.types import ErrorCode


class DomainError(Exception):
    """Base domain error."""

    code: ErrorCode = ErrorCode.VALIDATION


class ValidationError(DomainError):
    """Domain validation error."""

    code = ErrorCode.VALIDATION


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class EventAlreadyExistsError(DomainError):
    """Raised when creating an event whose date and start time are taken."""

    code = ErrorCode.EVENT_ALREADY_EXISTS

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"An event already exists at {event_id}")


class EventAlreadyBookedError(DomainError):
    """Raised when approving a booking for an event held by another booking."""

    code = ErrorCode.EVENT_ALREADY_BOOKED

    def __init__(self, event_id: str, booking_id: str):
        self.event_id = event_id
        self.booking_id = booking_id
        super().__init__(f"Event {event_id} is already booked by {booking_id}")


class InvitationError(DomainError):
    """Base error for a failed invitation redemption."""

    pass


class InvalidTokenError(InvitationError):
    """Raised when no invitation matches a token."""

    code = ErrorCode.INVALID_TOKEN

    def __init__(self) -> None:
        super().__init__("Invitation link is invalid")


class InvitationExpiredError(InvitationError):
    """Raised when an invitation is redeemed after its expiry."""

    code = ErrorCode.EXPIRED

    def __init__(self, invitation_id: str):
        self.invitation_id = invitation_id
        super().__init__("Invitation link has expired")


class InvitationAlreadyClaimedError(InvitationError):
    """Raised when an invitation has already produced a booking."""

    code = ErrorCode.ALREADY_CLAIMED

    def __init__(self, invitation_id: str):
        self.invitation_id = invitation_id
        super().__init__("Invitation link has already been used")


class CalendarAuthRequiredError(DomainError):
    """Raised before approval when no calendar credential was supplied."""

    code = ErrorCode.CALENDAR_AUTH_REQUIRED

    def __init__(self) -> None:
        super().__init__("Calendar authorization is required to approve bookings")


class PersistenceError(DomainError):
    """Raised when a store write fails."""

    code = ErrorCode.PERSISTENCE_ERROR


class CalendarError(DomainError):
    """Base error for calendar bridge failures."""

    code = ErrorCode.REMOTE_ERROR


class CalendarConfigMissingError(CalendarError):
    """Raised when no calendar id is configured."""

    code = ErrorCode.CONFIG_MISSING

    def __init__(self) -> None:
        super().__init__("Calendar is not configured (CALENDAR__CALENDAR_ID)")


class CalendarAuthMissingError(CalendarError):
    """Raised when a calendar call has no usable credential."""

    code = ErrorCode.AUTH_MISSING

    def __init__(self) -> None:
        super().__init__("Calendar access is not authorized")


class CalendarRemoteError(CalendarError):
    """Raised when the calendar service answers with a failure."""

    code = ErrorCode.REMOTE_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
