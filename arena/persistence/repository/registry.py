"""PostgreSQL implementation of the registry-wide read repository."""

from typing import List

import logfire
from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from arena.domain.model import Competition
from arena.domain.repository import RegistryRepository
from arena.domain.value import RegistryCounts, UserId
from arena.persistence.mappers import row_to_competition
from arena.persistence.tables import competitions_table, votes_table


class PostgresRegistryRepository(RegistryRepository):
    """PostgreSQL implementation of RegistryRepository.

    Under READ COMMITTED every statement sees its own snapshot, so each
    cross-table read is issued as one statement.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def counts(self) -> RegistryCounts:
        """Count competitions and votes in one statement."""
        with logfire.span("registry_repository.counts"):
            stmt = select(
                select(func.count())
                .select_from(competitions_table)
                .scalar_subquery()
                .label("total_competitions"),
                select(func.count())
                .select_from(votes_table)
                .scalar_subquery()
                .label("total_votes"),
            )
            result = await self.session.execute(stmt)
            row = result.one()
            return RegistryCounts(
                total_competitions=row.total_competitions,
                total_votes=row.total_votes,
            )

    async def find_open_for_voter(self, voter: UserId) -> List[Competition]:
        """Find open competitions for a voter with an anti-join on votes."""
        already_voted = exists().where(
            votes_table.c.competition_id == competitions_table.c.id,
            votes_table.c.voter == voter,
        )
        stmt = (
            select(competitions_table)
            .where(
                competitions_table.c.is_active.is_(True),
                competitions_table.c.organizer != voter,
                ~already_voted,
            )
            .order_by(competitions_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_competition(row._asdict()) for row in result.fetchall()]
