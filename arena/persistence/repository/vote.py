"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from arena.domain.model import Vote
from arena.domain.repository import VoteRepository
from arena.domain.value import CompetitionId, UserId, VoteId
from arena.persistence.mappers import row_to_vote, vote_to_dict
from arena.persistence.tables import is_storable_id, vote_id_seq, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> VoteId:
        """Allocate the next vote ID from its sequence."""
        value = await self.session.scalar(select(vote_id_seq.next_value()))
        return VoteId(int(value))

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        if not is_storable_id(vote_id):
            return None

        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_competition(
        self, voter: UserId, competition_id: CompetitionId
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific competition."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter == voter,
                votes_table.c.competition_id == competition_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_competition(self, competition_id: CompetitionId) -> List[Vote]:
        """Find all votes on a competition in submission order."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.competition_id == competition_id)
            .order_by(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_voted_competition_ids(
        self, voter: UserId, competition_ids: Sequence[CompetitionId]
    ) -> set[CompetitionId]:
        """Find which competitions a voter has voted on (batch query)."""
        if not competition_ids:
            return set()

        stmt = select(votes_table.c.competition_id).where(
            and_(
                votes_table.c.voter == voter,
                votes_table.c.competition_id.in_(competition_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {CompetitionId(row.competition_id) for row in result.fetchall()}

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises:
            IntegrityError: On unique_vote constraint violation
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def count_by_competition(self, competition_id: CompetitionId) -> int:
        """Count votes on a competition."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.competition_id == competition_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count(self) -> int:
        """Count all votes."""
        stmt = select(func.count()).select_from(votes_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
