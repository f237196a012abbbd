"""In-memory registry read repository for testing."""

from arena.domain.model.competition import Competition
from arena.domain.repository.competition import CompetitionRepository
from arena.domain.repository.registry import RegistryRepository
from arena.domain.repository.vote import VoteRepository
from arena.domain.value import RegistryCounts, UserId


class InMemoryRegistryRepository(RegistryRepository):
    """Reads across the in-memory competition and vote stores.

    The stores never yield to the event loop mid-read, so combining them
    here sees a single state.
    """

    def __init__(
        self,
        competition_repository: CompetitionRepository,
        vote_repository: VoteRepository,
    ) -> None:
        self.competition_repository = competition_repository
        self.vote_repository = vote_repository

    async def counts(self) -> RegistryCounts:
        """Count all competitions and all votes."""
        return RegistryCounts(
            total_competitions=await self.competition_repository.count(),
            total_votes=await self.vote_repository.count(),
        )

    async def find_open_for_voter(self, voter: UserId) -> list[Competition]:
        """Find competitions a voter may still vote on."""
        candidates = await self.competition_repository.find_active(
            exclude_organizer=voter
        )
        voted = await self.vote_repository.find_voted_competition_ids(
            voter, [c.id for c in candidates]
        )
        return [c for c in candidates if c.id not in voted]
