"""Persistence component providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from arena.config import Settings
from arena.domain.repository import (
    CompetitionRepository,
    RegistryRepository,
    VoteRepository,
)
from arena.persistence.database import create_engine, create_session_factory
from arena.persistence.repository import (
    PostgresCompetitionRepository,
    PostgresRegistryRepository,
    PostgresVoteRepository,
)
from arena.util.di.base import ProviderBase
from arena.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where competitions and votes are stored."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL storage, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request transaction.

        Committed when the request scope closes cleanly. A domain error or a
        unique-key violation rolls back every write made during the request.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Registry transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_competition_repository(
        self, session: AsyncSession
    ) -> CompetitionRepository:
        return PostgresCompetitionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_registry_repository(self, session: AsyncSession) -> RegistryRepository:
        return PostgresRegistryRepository(session)
