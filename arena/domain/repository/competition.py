"""Competition repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from arena.domain.model.competition import Competition
from arena.domain.value import CompetitionId, UserId


class CompetitionRepository(ABC):
    """Repository for Competition aggregate.

    Defines the contract for competition persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def next_id(self) -> CompetitionId:
        """Allocate the next competition ID.

        IDs start at 1, strictly increase and are never handed out twice.

        Returns:
            A fresh competition ID
        """
        pass

    @abstractmethod
    async def find_by_id(self, competition_id: CompetitionId) -> Optional[Competition]:
        """Find a competition by ID.

        Args:
            competition_id: The competition's unique identifier

        Returns:
            The competition if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, competition_id: CompetitionId
    ) -> Optional[Competition]:
        """Find a competition by ID and lock it for the current transaction.

        Used by mutating operations so concurrent votes and status changes
        on the same competition are serialized.

        Args:
            competition_id: The competition's unique identifier

        Returns:
            The competition if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_organizer(self, organizer: UserId) -> List[Competition]:
        """Find all competitions created by an organizer, in creation order.

        Args:
            organizer: The organizer's identity

        Returns:
            List of competitions ordered by ID
        """
        pass

    @abstractmethod
    async def find_active(
        self, exclude_organizer: Optional[UserId] = None
    ) -> List[Competition]:
        """Find active competitions in ascending ID order.

        Args:
            exclude_organizer: Skip competitions created by this identity

        Returns:
            List of active competitions
        """
        pass

    @abstractmethod
    async def save(self, competition: Competition) -> Competition:
        """Save a new competition.

        Args:
            competition: The competition to save

        Returns:
            The saved competition
        """
        pass

    @abstractmethod
    async def set_active(
        self, competition_id: CompetitionId, is_active: bool
    ) -> Optional[Competition]:
        """Set the active flag of a competition.

        Args:
            competition_id: The competition ID
            is_active: New value of the flag

        Returns:
            Updated competition, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_vote_count(self, competition_id: CompetitionId) -> None:
        """Atomically increment vote_count by 1.

        Args:
            competition_id: The competition ID
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all competitions ever created.

        Returns:
            Total number of competitions
        """
        pass
