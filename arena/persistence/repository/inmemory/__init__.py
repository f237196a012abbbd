"""In-memory repository implementations for testing."""

from .competition import InMemoryCompetitionRepository
from .registry import InMemoryRegistryRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCompetitionRepository",
    "InMemoryRegistryRepository",
    "InMemoryVoteRepository",
]
