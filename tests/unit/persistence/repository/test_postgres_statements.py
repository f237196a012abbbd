"""Unit tests for the PostgreSQL repositories against a mocked session.

These check the statements issued, not their results; the database-backed
behaviour lives in tests/integration.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from arena.domain.value import CompetitionId, UserId, VoteId
from arena.persistence.repository import (
    PostgresCompetitionRepository,
    PostgresRegistryRepository,
    PostgresVoteRepository,
)
from arena.persistence.tables import MAX_ID


def mock_session(result: MagicMock | None = None) -> AsyncMock:
    session = AsyncMock()
    session.execute = AsyncMock(return_value=result or MagicMock())
    return session


def compiled(session: AsyncMock) -> str:
    stmt = session.execute.await_args.args[0]
    return str(stmt.compile(dialect=postgresql.dialect()))


class TestRegistryReads:
    """Cross-table reads must be answered by a single statement."""

    @pytest.mark.asyncio
    async def test_counts_single_statement(self):
        result = MagicMock()
        result.one.return_value = MagicMock(total_competitions=3, total_votes=5)
        session = mock_session(result)
        repo = PostgresRegistryRepository(session)

        counts = await repo.counts()

        assert (counts.total_competitions, counts.total_votes) == (3, 5)
        assert session.execute.await_count == 1
        sql = compiled(session)
        assert "FROM competitions" in sql
        assert "FROM votes" in sql

    @pytest.mark.asyncio
    async def test_open_for_voter_single_statement(self):
        result = MagicMock()
        result.fetchall.return_value = []
        session = mock_session(result)
        repo = PostgresRegistryRepository(session)

        competitions = await repo.find_open_for_voter(UserId("0xB0B"))

        assert competitions == []
        assert session.execute.await_count == 1
        sql = compiled(session)
        assert "NOT" in sql
        assert "EXISTS" in sql
        assert "votes.voter" in sql


class TestOutOfRangeIds:
    """IDs beyond the BIGINT columns are unknown, never sent to the driver."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("competition_id", [10**20, MAX_ID + 1, 0, -1])
    async def test_competition_lookups(self, competition_id):
        session = mock_session()
        repo = PostgresCompetitionRepository(session)

        found = await repo.find_by_id(CompetitionId(competition_id))
        locked = await repo.find_by_id_for_update(CompetitionId(competition_id))

        assert found is None
        assert locked is None
        session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_vote_lookup(self):
        session = mock_session()
        repo = PostgresVoteRepository(session)

        assert await repo.find_by_id(VoteId(10**20)) is None
        session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_largest_id_is_queried(self):
        result = MagicMock()
        result.fetchone.return_value = None
        session = mock_session(result)
        repo = PostgresCompetitionRepository(session)

        assert await repo.find_by_id(CompetitionId(MAX_ID)) is None
        assert session.execute.await_count == 1
