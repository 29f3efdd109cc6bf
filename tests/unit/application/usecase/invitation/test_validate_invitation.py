"""Tests for validate invitation use case."""

from datetime import timedelta

import pytest

from venue.application.usecase.invitation import (
    ValidateInvitationRequest,
    ValidateInvitationUseCase,
)
from venue.domain.model.common import utcnow
from venue.domain.repository import EventRepository, InvitationRepository
from venue.domain.service import InvitationService
from venue.domain.value import ErrorCode, EventId
from tests.conftest import make_event
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestValidateInvitationUseCase:
    """Tests for ValidateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_validate_fresh_invitation(self, unit_env):
        """Test a fresh link shows the invited event."""
        # Arrange
        event_repo = await unit_env.get(EventRepository)
        await event_repo.create(make_event())
        invitation = await (await unit_env.get(InvitationService)).issue(
            EventId("2024-05-01_1900")
        )
        use_case = await unit_env.get(ValidateInvitationUseCase)

        # Act
        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        # Assert
        assert response.valid is True
        assert response.event.id == "2024-05-01_1900"
        assert response.performer_email == "band@x.com"
        assert response.expires_at == invitation.expires_at

    @pytest.mark.asyncio
    async def test_validate_does_not_claim(self, unit_env):
        event_repo = await unit_env.get(EventRepository)
        invitation_repo = await unit_env.get(InvitationRepository)
        await event_repo.create(make_event())
        invitation = await (await unit_env.get(InvitationService)).issue(
            EventId("2024-05-01_1900")
        )
        use_case = await unit_env.get(ValidateInvitationUseCase)

        await use_case.execute(ValidateInvitationRequest(token=invitation.token.root))

        assert (await invitation_repo.find_by_id(invitation.id)).claimed is False

    @pytest.mark.asyncio
    async def test_validate_expired_invitation(self, unit_env):
        """Test an invitation issued an hour ago is reported expired."""
        # Arrange
        event_repo = await unit_env.get(EventRepository)
        await event_repo.create(make_event())
        invitation = await (await unit_env.get(InvitationService)).issue(
            EventId("2024-05-01_1900"), now=utcnow() - timedelta(hours=1)
        )
        use_case = await unit_env.get(ValidateInvitationUseCase)

        # Act
        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        # Assert
        assert response.valid is False
        assert response.error == ErrorCode.EXPIRED

    @pytest.mark.asyncio
    async def test_validate_unknown_token(self, unit_env):
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(ValidateInvitationRequest(token="nope"))

        assert response.valid is False
        assert response.error == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_validate_empty_token(self, unit_env):
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(ValidateInvitationRequest(token=""))

        assert response.error == ErrorCode.INVALID_TOKEN
