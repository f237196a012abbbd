"""Mock persistence providers for testing."""

from dishka import Scope, provide

from arena.domain.repository import (
    CompetitionRepository,
    RegistryRepository,
    VoteRepository,
)
from arena.persistence.repository.inmemory import (
    InMemoryCompetitionRepository,
    InMemoryRegistryRepository,
    InMemoryVoteRepository,
)
from arena.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across HTTP requests within one test
    client; each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_competition_repository(self) -> CompetitionRepository:
        """Provide in-memory competition repository."""
        return InMemoryCompetitionRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_registry_repository(
        self,
        competition_repository: CompetitionRepository,
        vote_repository: VoteRepository,
    ) -> RegistryRepository:
        """Provide cross-table reads over the in-memory stores."""
        return InMemoryRegistryRepository(competition_repository, vote_repository)
