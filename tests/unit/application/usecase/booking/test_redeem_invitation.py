"""Tests for redeem invitation use case."""

from unittest.mock import AsyncMock, patch

import pytest

from venue.application.usecase.booking import (
    RedeemInvitationRequest,
    RedeemInvitationUseCase,
)
from venue.domain.error import PersistenceError
from venue.domain.repository import (
    BookingRepository,
    EventRepository,
    InvitationRepository,
)
from venue.domain.service import InvitationService
from venue.domain.value import BookingStatus, ErrorCode, EventId
from tests.conftest import make_event
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _issue_token(env) -> str:
    event_repo = await env.get(EventRepository)
    await event_repo.create(make_event())
    invitation = await (await env.get(InvitationService)).issue(
        EventId("2024-05-01_1900")
    )
    return invitation.token.root


class TestRedeemInvitationUseCase:
    """Tests for RedeemInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_redeem_creates_pending_booking(self, unit_env):
        """Test a performer's submission becomes a pending booking."""
        # Arrange
        token = await _issue_token(unit_env)
        use_case = await unit_env.get(RedeemInvitationUseCase)

        # Act
        response = await use_case.execute(
            RedeemInvitationRequest(
                token=token,
                performer_name="The Band",
                performer_email="lead@band.com",
                notes="Three piece",
            )
        )

        # Assert
        assert response.ok
        assert response.booking.status == BookingStatus.PENDING
        assert response.booking.performer_email == "lead@band.com"
        assert response.booking.performer_id == "lead_band_com"

    @pytest.mark.asyncio
    async def test_redeem_twice_reports_claimed(self, unit_env):
        token = await _issue_token(unit_env)
        use_case = await unit_env.get(RedeemInvitationUseCase)
        request = RedeemInvitationRequest(token=token, performer_name="The Band")
        await use_case.execute(request)

        response = await use_case.execute(request)

        assert response.error == ErrorCode.ALREADY_CLAIMED
        assert response.booking is None

    @pytest.mark.asyncio
    async def test_redeem_unknown_token(self, unit_env):
        use_case = await unit_env.get(RedeemInvitationUseCase)

        response = await use_case.execute(
            RedeemInvitationRequest(token="missing", performer_name="The Band")
        )

        assert response.error == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_booking_write_failure_propagates(self, unit_env):
        """Test a failed booking write is raised so the claim is rolled back."""
        # Arrange
        token = await _issue_token(unit_env)
        booking_repo = await unit_env.get(BookingRepository)
        use_case = await unit_env.get(RedeemInvitationUseCase)

        # Act / Assert
        with patch.object(
            booking_repo, "create", AsyncMock(side_effect=PersistenceError("down"))
        ):
            with pytest.raises(PersistenceError):
                await use_case.execute(
                    RedeemInvitationRequest(token=token, performer_name="The Band")
                )

        # The in-memory store has no transaction, so only the booking is absent
        assert await booking_repo.find_all() == []
        invitation_repo = await unit_env.get(InvitationRepository)
        assert len(await invitation_repo.find_by_event(EventId("2024-05-01_1900"))) == 1
