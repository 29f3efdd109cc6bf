"""Interface layer errors.

Maps typed use case failures onto HTTP responses.
"""

import logfire
from fastapi import HTTPException, status

from venue.application.usecase.base import UseCaseResponse
from venue.domain.value import ErrorCode

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_TOKEN: status.HTTP_404_NOT_FOUND,
    ErrorCode.EXPIRED: status.HTTP_410_GONE,
    ErrorCode.ALREADY_CLAIMED: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_ALREADY_BOOKED: status.HTTP_409_CONFLICT,
    ErrorCode.CALENDAR_AUTH_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTH_MISSING: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONFIG_MISSING: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.REMOTE_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class InterfaceError(HTTPException):
    """HTTP error carrying a typed error code."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        super().__init__(
            status_code=ERROR_STATUS.get(code, status.HTTP_400_BAD_REQUEST),
            detail={"error": code.value, "message": message or code.value},
        )


def raise_for_error(response: UseCaseResponse) -> None:
    """Raise the HTTP error matching a failed use case response.

    Args:
        response: Any use case response

    Raises:
        InterfaceError: If ``response.error`` is set
    """
    if response.error is None:
        return
    http_status = ERROR_STATUS.get(response.error, status.HTTP_400_BAD_REQUEST)
    if http_status >= 500:
        logfire.error(
            "Request failed", error=response.error.value, message=response.message
        )
    raise InterfaceError(response.error, response.message)
