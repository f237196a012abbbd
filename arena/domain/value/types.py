"""Domain value types for the competition registry."""

from enum import Enum

from arena.domain.value.common import ValueObject

MIN_RATING = 1
MAX_RATING = 5


class CompetitionStatusChange(str, Enum):
    """How a competition's active flag was changed."""

    TOGGLED = "toggled"
    DEACTIVATED = "deactivated"


class VoteVisibility(str, Enum):
    """Who may read the votes cast on a competition."""

    RESTRICTED = "restricted"  # Organizer and registry owners
    PUBLIC = "public"


class RegistryCounts(ValueObject):
    """Totals of the two monotonic registry counters."""

    total_competitions: int
    total_votes: int


def is_valid_rating(rating: int) -> bool:
    """Check that a rating falls within the accepted 1-5 scale."""
    return MIN_RATING <= rating <= MAX_RATING
