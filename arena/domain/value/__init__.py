"""Domain value objects for the competition registry."""

from arena.domain.value.identifiers import CompetitionId, UserId, VoteId
from arena.domain.value.types import (
    MAX_RATING,
    MIN_RATING,
    CompetitionStatusChange,
    RegistryCounts,
    VoteVisibility,
    is_valid_rating,
)

__all__ = [
    # Identifiers
    "CompetitionId",
    "UserId",
    "VoteId",
    # Types
    "CompetitionStatusChange",
    "RegistryCounts",
    "VoteVisibility",
    "MIN_RATING",
    "MAX_RATING",
    "is_valid_rating",
]
