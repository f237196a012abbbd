"""In-memory competition repository for testing."""

from typing import Optional

from arena.domain.model.competition import Competition
from arena.domain.repository.competition import CompetitionRepository
from arena.domain.value import CompetitionId, UserId


class InMemoryCompetitionRepository(CompetitionRepository):
    """In-memory implementation of CompetitionRepository for testing."""

    def __init__(self) -> None:
        self._competitions: dict[CompetitionId, Competition] = {}
        self._last_id = 0

    async def next_id(self) -> CompetitionId:
        """Allocate the next competition ID."""
        self._last_id += 1
        return CompetitionId(self._last_id)

    async def find_by_id(self, competition_id: CompetitionId) -> Optional[Competition]:
        """Find a competition by ID."""
        return self._competitions.get(competition_id)

    async def find_by_id_for_update(
        self, competition_id: CompetitionId
    ) -> Optional[Competition]:
        """Find a competition by ID (no row locks in memory)."""
        return self._competitions.get(competition_id)

    async def find_by_organizer(self, organizer: UserId) -> list[Competition]:
        """Find competitions created by an organizer, in creation order."""
        return [c for c in self._sorted() if c.organizer == organizer]

    async def find_active(
        self, exclude_organizer: Optional[UserId] = None
    ) -> list[Competition]:
        """Find active competitions in ascending ID order."""
        return [
            c
            for c in self._sorted()
            if c.is_active and c.organizer != exclude_organizer
        ]

    async def save(self, competition: Competition) -> Competition:
        """Save a competition."""
        self._competitions[competition.id] = competition
        self._last_id = max(self._last_id, competition.id)
        return competition

    async def set_active(
        self, competition_id: CompetitionId, is_active: bool
    ) -> Optional[Competition]:
        """Set the active flag of a competition."""
        competition = self._competitions.get(competition_id)
        if competition is None:
            return None

        # Competitions are immutable, store an updated copy
        updated = competition.model_copy(update={"is_active": is_active})
        self._competitions[competition_id] = updated
        return updated

    async def increment_vote_count(self, competition_id: CompetitionId) -> None:
        """Increment vote_count by 1."""
        competition = self._competitions.get(competition_id)
        if competition:
            self._competitions[competition_id] = competition.model_copy(
                update={"vote_count": competition.vote_count + 1}
            )

    async def count(self) -> int:
        """Count all competitions."""
        return len(self._competitions)

    def _sorted(self) -> list[Competition]:
        return sorted(self._competitions.values(), key=lambda c: c.id)
