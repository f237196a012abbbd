"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from arena.domain.model.vote import Vote
from arena.domain.repository.vote import VoteRepository
from arena.domain.value import CompetitionId, UserId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._has_voted: set[tuple[UserId, CompetitionId]] = set()
        self._last_id = 0

    async def next_id(self) -> VoteId:
        """Allocate the next vote ID."""
        self._last_id += 1
        return VoteId(self._last_id)

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        for vote in self._votes:
            if vote.id == vote_id:
                return vote
        return None

    async def find_by_voter_and_competition(
        self, voter: UserId, competition_id: CompetitionId
    ) -> Optional[Vote]:
        """Find a voter's vote on a competition."""
        if (voter, competition_id) not in self._has_voted:
            return None
        for vote in self._votes:
            if vote.voter == voter and vote.competition_id == competition_id:
                return vote
        return None

    async def find_by_competition(self, competition_id: CompetitionId) -> list[Vote]:
        """Find all votes on a competition in submission order."""
        return [v for v in self._votes if v.competition_id == competition_id]

    async def find_voted_competition_ids(
        self, voter: UserId, competition_ids: Sequence[CompetitionId]
    ) -> set[CompetitionId]:
        """Find which competitions a voter has voted on (batch query)."""
        return {cid for cid in competition_ids if (voter, cid) in self._has_voted}

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        key = (vote.voter, vote.competition_id)
        if key in self._has_voted:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        self._has_voted.add(key)
        self._last_id = max(self._last_id, vote.id)
        return vote

    async def count_by_competition(self, competition_id: CompetitionId) -> int:
        """Count votes on a competition."""
        return sum(1 for v in self._votes if v.competition_id == competition_id)

    async def count(self) -> int:
        """Count all votes."""
        return len(self._votes)
