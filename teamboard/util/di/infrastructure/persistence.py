"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from teamboard.config import Settings
from teamboard.domain.repository import (
    IdeaRepository,
    MeetingRepository,
    PreferenceRepository,
    TaskRepository,
    VoteRepository,
)
from teamboard.persistence.database import create_engine, create_session_factory
from teamboard.persistence.repository import (
    PostgresIdeaRepository,
    PostgresMeetingRepository,
    PostgresPreferenceRepository,
    PostgresTaskRepository,
    PostgresVoteRepository,
)
from teamboard.util.di.base import ProviderBase
from teamboard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

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

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
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
    def get_idea_repository(self, session: AsyncSession) -> IdeaRepository:
        """Provide Idea repository."""
        return PostgresIdeaRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, session: AsyncSession) -> TaskRepository:
        """Provide Task repository."""
        return PostgresTaskRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_meeting_repository(self, session: AsyncSession) -> MeetingRepository:
        """Provide Meeting repository."""
        return PostgresMeetingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_preference_repository(self, session: AsyncSession) -> PreferenceRepository:
        """Provide Preference repository."""
        return PostgresPreferenceRepository(session)
