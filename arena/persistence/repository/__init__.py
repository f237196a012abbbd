"""PostgreSQL repository implementations."""

from arena.persistence.repository.competition import PostgresCompetitionRepository
from arena.persistence.repository.registry import PostgresRegistryRepository
from arena.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCompetitionRepository",
    "PostgresRegistryRepository",
    "PostgresVoteRepository",
]
