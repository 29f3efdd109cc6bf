"""Domain layer DI providers."""

from dishka import Scope, provide

from venue.config import Settings
from venue.domain.repository import (
    BookingRepository,
    EventRepository,
    InvitationRepository,
)
from venue.domain.service import (
    ApprovalService,
    BookingService,
    CalendarClient,
    CalendarService,
    EventService,
    InvitationService,
    QueryService,
)
from venue.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_calendar_service(self, calendar_client: CalendarClient) -> CalendarService:
        """Provide calendar domain service."""
        return CalendarService(calendar_client=calendar_client)

    @provide
    def get_event_service(
        self,
        event_repository: EventRepository,
        booking_repository: BookingRepository,
        invitation_repository: InvitationRepository,
        calendar_service: CalendarService,
    ) -> EventService:
        """Provide event domain service."""
        return EventService(
            event_repository=event_repository,
            booking_repository=booking_repository,
            invitation_repository=invitation_repository,
            calendar_service=calendar_service,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        event_repository: EventRepository,
        settings: Settings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            event_repository=event_repository,
            ttl_seconds=settings.invitations.ttl_seconds,
        )

    @provide
    def get_booking_service(
        self,
        booking_repository: BookingRepository,
        invitation_repository: InvitationRepository,
        event_repository: EventRepository,
    ) -> BookingService:
        """Provide booking domain service."""
        return BookingService(
            booking_repository=booking_repository,
            invitation_repository=invitation_repository,
            event_repository=event_repository,
        )

    @provide
    def get_approval_service(
        self,
        booking_repository: BookingRepository,
        event_repository: EventRepository,
        calendar_service: CalendarService,
    ) -> ApprovalService:
        """Provide approval domain service."""
        return ApprovalService(
            booking_repository=booking_repository,
            event_repository=event_repository,
            calendar_service=calendar_service,
        )

    @provide
    def get_query_service(
        self,
        event_repository: EventRepository,
        booking_repository: BookingRepository,
        calendar_service: CalendarService,
    ) -> QueryService:
        """Provide query domain service."""
        return QueryService(
            event_repository=event_repository,
            booking_repository=booking_repository,
            calendar_service=calendar_service,
        )
