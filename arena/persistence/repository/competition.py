"""PostgreSQL implementation of Competition repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from arena.domain.model import Competition
from arena.domain.repository import CompetitionRepository
from arena.domain.value import CompetitionId, UserId
from arena.persistence.mappers import competition_to_dict, row_to_competition
from arena.persistence.tables import (
    competition_id_seq,
    competitions_table,
    is_storable_id,
)


class PostgresCompetitionRepository(CompetitionRepository):
    """PostgreSQL implementation of CompetitionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> CompetitionId:
        """Allocate the next competition ID from its sequence."""
        value = await self.session.scalar(select(competition_id_seq.next_value()))
        return CompetitionId(int(value))

    async def find_by_id(self, competition_id: CompetitionId) -> Optional[Competition]:
        """Find a competition by ID."""
        with logfire.span(
            "competition_repository.find_by_id", competition_id=competition_id
        ):
            if not is_storable_id(competition_id):
                return None

            stmt = select(competitions_table).where(
                competitions_table.c.id == competition_id
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_competition(row._asdict()) if row else None

    async def find_by_id_for_update(
        self, competition_id: CompetitionId
    ) -> Optional[Competition]:
        """Find a competition by ID, holding a row lock until commit."""
        if not is_storable_id(competition_id):
            return None

        stmt = (
            select(competitions_table)
            .where(competitions_table.c.id == competition_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_competition(row._asdict()) if row else None

    async def find_by_organizer(self, organizer: UserId) -> List[Competition]:
        """Find competitions created by an organizer, in creation order."""
        stmt = (
            select(competitions_table)
            .where(competitions_table.c.organizer == organizer)
            .order_by(competitions_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_competition(row._asdict()) for row in result.fetchall()]

    async def find_active(
        self, exclude_organizer: Optional[UserId] = None
    ) -> List[Competition]:
        """Find active competitions in ascending ID order."""
        stmt = select(competitions_table).where(competitions_table.c.is_active.is_(True))
        if exclude_organizer is not None:
            stmt = stmt.where(competitions_table.c.organizer != exclude_organizer)
        stmt = stmt.order_by(competitions_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_competition(row._asdict()) for row in result.fetchall()]

    async def save(self, competition: Competition) -> Competition:
        """Insert a new competition."""
        stmt = insert(competitions_table).values(**competition_to_dict(competition))
        await self.session.execute(stmt)
        await self.session.flush()
        return competition

    async def set_active(
        self, competition_id: CompetitionId, is_active: bool
    ) -> Optional[Competition]:
        """Set the active flag of a competition."""
        stmt = (
            update(competitions_table)
            .where(competitions_table.c.id == competition_id)
            .values(is_active=is_active)
            .returning(competitions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_competition(row._asdict()) if row else None

    async def increment_vote_count(self, competition_id: CompetitionId) -> None:
        """Atomically increment vote_count by 1.

        Uses SQL-level increment to avoid race conditions.
        """
        stmt = (
            update(competitions_table)
            .where(competitions_table.c.id == competition_id)
            .values(vote_count=competitions_table.c.vote_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count(self) -> int:
        """Count all competitions."""
        stmt = select(func.count()).select_from(competitions_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
