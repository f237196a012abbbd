"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from arena.domain.model.vote import Vote
from arena.domain.value import CompetitionId, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations. Votes are
    append-only: there is no update or delete.
    """

    @abstractmethod
    async def next_id(self) -> VoteId:
        """Allocate the next vote ID.

        Returns:
            A fresh vote ID
        """
        pass

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_competition(
        self, voter: UserId, competition_id: CompetitionId
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific competition.

        Args:
            voter: The voter's identity
            competition_id: ID of the competition

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_competition(self, competition_id: CompetitionId) -> List[Vote]:
        """Find all votes on a competition in submission order.

        Args:
            competition_id: ID of the competition

        Returns:
            List of votes ordered by ID
        """
        pass

    @abstractmethod
    async def find_voted_competition_ids(
        self, voter: UserId, competition_ids: Sequence[CompetitionId]
    ) -> set[CompetitionId]:
        """Find which of the given competitions a voter has voted on (batch query).

        Args:
            voter: The voter's identity
            competition_ids: Competition IDs to check

        Returns:
            Subset of competition_ids the voter has a vote on
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already voted on the competition
        """
        pass

    @abstractmethod
    async def count_by_competition(self, competition_id: CompetitionId) -> int:
        """Count votes on a competition.

        Args:
            competition_id: ID of the competition

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all votes ever cast.

        Returns:
            Total number of votes
        """
        pass
