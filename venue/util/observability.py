"""Observability configuration using Logfire.

Every service operation opens a span and emits structured events:

    import logfire

    with logfire.span("approval_service.approve", booking_id=str(booking_id)):
        logfire.info("Booking approved", booking_id=str(booking_id))

Invitation tokens are never logged in full; callers truncate them to the
first eight characters.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from venue.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is decided by, in order: the explicit
    OBSERVABILITY__SEND_TO_LOGFIRE flag, then presence of
    OBSERVABILITY__LOGFIRE_TOKEN. Without either, output stays on the console.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "venue-booking-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        calendar_configured=bool(settings.calendar.calendar_id),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the API.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        # Signup links carry the invitation token in the query string
        if hasattr(request, "query_params") and "token" in request.query_params:
            result["token"] = request.query_params["token"][:8] + "..."
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Authorization carries the calendar bearer token
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the savepoints used by booking approval.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound Google Calendar requests."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
