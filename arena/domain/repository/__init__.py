"""Repository interfaces for the registry domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from arena.domain.repository.competition import CompetitionRepository
from arena.domain.repository.registry import RegistryRepository
from arena.domain.repository.vote import VoteRepository

__all__ = [
    "CompetitionRepository",
    "RegistryRepository",
    "VoteRepository",
]
