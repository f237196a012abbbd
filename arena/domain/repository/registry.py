"""Registry-wide read repository interface."""

from abc import ABC, abstractmethod
from typing import List

from arena.domain.model.competition import Competition
from arena.domain.value import RegistryCounts, UserId


class RegistryRepository(ABC):
    """Reads that span competitions and votes.

    Each method answers from a single point in time, so results never mix
    two states of the registry.
    """

    @abstractmethod
    async def counts(self) -> RegistryCounts:
        """Count all competitions and all votes together."""
        pass

    @abstractmethod
    async def find_open_for_voter(self, voter: UserId) -> List[Competition]:
        """Find competitions a voter may still vote on.

        Active, not organized by the voter and without a vote from the
        voter, in ascending ID order.

        Args:
            voter: Prospective voter

        Returns:
            List of open competitions
        """
        pass
