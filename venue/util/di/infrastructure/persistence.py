"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from venue.config import Settings
from venue.domain.repository import (
    BookingRepository,
    EventRepository,
    InvitationRepository,
)
from venue.persistence.database import create_engine, create_session_factory
from venue.persistence.repository import (
    PostgresBookingRepository,
    PostgresEventRepository,
    PostgresInvitationRepository,
)
from venue.util.di.base import ProviderBase
from venue.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception escaped, rolled
        back otherwise. Use cases that report failures as typed responses
        therefore commit whatever steps succeeded.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, session: AsyncSession) -> EventRepository:
        """Provide Event repository."""
        return PostgresEventRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_booking_repository(self, session: AsyncSession) -> BookingRepository:
        """Provide Booking repository."""
        return PostgresBookingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(
        self, session: AsyncSession
    ) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)
