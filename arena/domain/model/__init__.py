"""Domain model entities for the competition registry."""

from arena.domain.model.competition import Competition
from arena.domain.model.event import (
    CompetitionCreated,
    CompetitionStatusChanged,
    RegistryEvent,
    VoteSubmitted,
)
from arena.domain.model.vote import Vote

__all__ = [
    "Competition",
    "Vote",
    "RegistryEvent",
    "CompetitionCreated",
    "CompetitionStatusChanged",
    "VoteSubmitted",
]
