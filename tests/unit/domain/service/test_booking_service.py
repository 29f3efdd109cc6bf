"""Unit tests for BookingService invitation redemption."""

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import pytest

from venue.domain.error import (
    InvalidTokenError,
    InvitationAlreadyClaimedError,
    InvitationExpiredError,
    NotFoundError,
    ValidationError,
)
from venue.domain.model import Invitation
from venue.domain.repository import (
    BookingRepository,
    EventRepository,
    InvitationRepository,
)
from venue.domain.service import BookingService, InvitationService
from venue.domain.value import BookingStatus, EventId, InvitationToken
from tests.conftest import T0, make_event
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

EVENT_ID = EventId("2024-05-01_1900")


async def _invite(env) -> Invitation:
    """Store the default event and issue one invitation for it at T0."""
    event_repo = await env.get(EventRepository)
    await event_repo.create(make_event())
    service = await env.get(InvitationService)
    return await service.issue(EVENT_ID, now=T0)


class TestRedeemInvitation:
    """Tests for redeem_invitation."""

    @pytest.mark.asyncio
    async def test_redeem_within_window(self, unit_env):
        """Redeeming at T+100s records a pending booking and claims the link."""
        # Arrange
        invitation = await _invite(unit_env)
        service = await unit_env.get(BookingService)
        invitation_repo = await unit_env.get(InvitationRepository)
        booking_repo = await unit_env.get(BookingRepository)
        now = T0 + timedelta(seconds=100)

        # Act
        booking = await service.redeem_invitation(
            invitation.token, "The Band", notes="Bring amps", now=now
        )

        # Assert
        assert booking.status == BookingStatus.PENDING
        assert booking.event_id == EVENT_ID
        assert booking.performer_email == "band@x.com"
        assert booking.performer_id == "band_x_com"
        assert booking.event_title == "Friday Night Jazz"
        assert booking.event_date == "2024-05-01"
        assert booking.event_start_time == "19:00"
        assert booking.event_end_time == "21:00"
        assert booking.notes == "Bring amps"
        assert booking.invitation_id == invitation.id
        assert await booking_repo.find_by_id(booking.id) == booking

        claimed = await invitation_repo.find_by_id(invitation.id)
        assert claimed.claimed is True
        assert claimed.claimed_at == now

    @pytest.mark.asyncio
    async def test_redeem_at_expiry_instant_succeeds(self, unit_env):
        invitation = await _invite(unit_env)
        service = await unit_env.get(BookingService)

        booking = await service.redeem_invitation(
            invitation.token, "The Band", now=invitation.expires_at
        )

        assert booking.status == BookingStatus.PENDING

    @pytest.mark.asyncio
    async def test_redeem_after_expiry(self, unit_env):
        """Redeeming at T+301s fails and leaves the invitation unclaimed."""
        invitation = await _invite(unit_env)
        service = await unit_env.get(BookingService)
        invitation_repo = await unit_env.get(InvitationRepository)
        booking_repo = await unit_env.get(BookingRepository)

        with pytest.raises(InvitationExpiredError):
            await service.redeem_invitation(
                invitation.token, "The Band", now=T0 + timedelta(seconds=301)
            )

        assert (await invitation_repo.find_by_id(invitation.id)).claimed is False
        assert await booking_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_redeem_unknown_token(self, unit_env):
        await _invite(unit_env)
        service = await unit_env.get(BookingService)

        with pytest.raises(InvalidTokenError):
            await service.redeem_invitation(
                InvitationToken(root="not-a-real-token"), "The Band", now=T0
            )

    @pytest.mark.asyncio
    async def test_redeem_twice(self, unit_env):
        """The second redemption of one link is refused."""
        invitation = await _invite(unit_env)
        service = await unit_env.get(BookingService)
        booking_repo = await unit_env.get(BookingRepository)
        now = T0 + timedelta(seconds=10)
        await service.redeem_invitation(invitation.token, "The Band", now=now)

        with pytest.raises(InvitationAlreadyClaimedError):
            await service.redeem_invitation(invitation.token, "Other Band", now=now)

        assert len(await booking_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_expiry_checked_before_claim(self, unit_env):
        """A claimed and expired link reports expiry first."""
        invitation = await _invite(unit_env)
        service = await unit_env.get(BookingService)
        await service.redeem_invitation(
            invitation.token, "The Band", now=T0 + timedelta(seconds=10)
        )

        with pytest.raises(InvitationExpiredError):
            await service.redeem_invitation(
                invitation.token, "The Band", now=T0 + timedelta(hours=1)
            )

    @pytest.mark.asyncio
    async def test_redeem_for_deleted_event(self, unit_env):
        invitation = await _invite(unit_env)
        event_repo = await unit_env.get(EventRepository)
        invitation_repo = await unit_env.get(InvitationRepository)
        service = await unit_env.get(BookingService)
        await event_repo.delete(EVENT_ID)

        with pytest.raises(NotFoundError):
            await service.redeem_invitation(
                invitation.token, "The Band", now=T0 + timedelta(seconds=10)
            )

        assert (await invitation_repo.find_by_id(invitation.id)).claimed is False

    @pytest.mark.asyncio
    async def test_redeem_without_name(self, unit_env):
        invitation = await _invite(unit_env)
        service = await unit_env.get(BookingService)
        invitation_repo = await unit_env.get(InvitationRepository)

        with pytest.raises(ValidationError):
            await service.redeem_invitation(
                invitation.token, "   ", now=T0 + timedelta(seconds=10)
            )

        assert (await invitation_repo.find_by_id(invitation.id)).claimed is False

    @pytest.mark.asyncio
    async def test_lost_race_creates_no_booking(self, unit_env):
        """A racer that read the invitation before the winner claimed it loses."""
        # Arrange: the winner has already claimed, but the loser saw a stale read
        invitation = await _invite(unit_env)
        service = await unit_env.get(BookingService)
        invitation_repo = await unit_env.get(InvitationRepository)
        booking_repo = await unit_env.get(BookingRepository)
        now = T0 + timedelta(seconds=10)
        await service.redeem_invitation(invitation.token, "Winner", now=now)

        # Act / Assert
        with patch.object(
            invitation_repo, "find_by_token", AsyncMock(return_value=invitation)
        ):
            with pytest.raises(InvitationAlreadyClaimedError):
                await service.redeem_invitation(invitation.token, "Loser", now=now)

        bookings = await booking_repo.find_all()
        assert [b.performer_name for b in bookings] == ["Winner"]
