"""Application layer DI providers."""

from dishka import Scope, provide

from venue.application.usecase.booking import (
    ApproveBookingUseCase,
    RedeemInvitationUseCase,
    RejectBookingUseCase,
)
from venue.application.usecase.event import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    UpdateEventUseCase,
)
from venue.application.usecase.invitation import (
    IssueInvitationUseCase,
    ListInvitationsUseCase,
    ValidateInvitationUseCase,
)
from venue.application.usecase.query import (
    ListByStatusUseCase,
    ListCalendarWindowUseCase,
)
from venue.config import Settings
from venue.domain.service import (
    ApprovalService,
    BookingService,
    EventService,
    InvitationService,
    QueryService,
)
from venue.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Event use cases
    @provide(scope=Scope.REQUEST)
    def get_create_event_use_case(
        self, event_service: EventService
    ) -> CreateEventUseCase:
        """Provide create event use case."""
        return CreateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_get_event_use_case(self, event_service: EventService) -> GetEventUseCase:
        """Provide get event use case."""
        return GetEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_update_event_use_case(
        self, event_service: EventService
    ) -> UpdateEventUseCase:
        """Provide update event use case."""
        return UpdateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_event_use_case(
        self, event_service: EventService
    ) -> DeleteEventUseCase:
        """Provide delete event use case."""
        return DeleteEventUseCase(event_service=event_service)

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_issue_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> IssueInvitationUseCase:
        """Provide issue invitation use case."""
        return IssueInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService, event_service: EventService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(
            invitation_service=invitation_service, event_service=event_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(invitation_service=invitation_service)

    # Booking use cases
    @provide(scope=Scope.REQUEST)
    def get_redeem_invitation_use_case(
        self, booking_service: BookingService
    ) -> RedeemInvitationUseCase:
        """Provide redeem invitation use case."""
        return RedeemInvitationUseCase(booking_service=booking_service)

    @provide(scope=Scope.REQUEST)
    def get_approve_booking_use_case(
        self,
        approval_service: ApprovalService,
        booking_service: BookingService,
        event_service: EventService,
    ) -> ApproveBookingUseCase:
        """Provide approve booking use case."""
        return ApproveBookingUseCase(
            approval_service=approval_service,
            booking_service=booking_service,
            event_service=event_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_reject_booking_use_case(
        self, approval_service: ApprovalService
    ) -> RejectBookingUseCase:
        """Provide reject booking use case."""
        return RejectBookingUseCase(approval_service=approval_service)

    # Query use cases
    @provide(scope=Scope.REQUEST)
    def get_list_by_status_use_case(
        self, query_service: QueryService
    ) -> ListByStatusUseCase:
        """Provide list by status use case."""
        return ListByStatusUseCase(query_service=query_service)

    @provide(scope=Scope.REQUEST)
    def get_list_calendar_window_use_case(
        self, query_service: QueryService, settings: Settings
    ) -> ListCalendarWindowUseCase:
        """Provide list calendar window use case."""
        return ListCalendarWindowUseCase(query_service=query_service, settings=settings)
