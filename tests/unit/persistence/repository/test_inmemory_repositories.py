"""Unit tests for the in-memory repositories."""

import pytest
from sqlalchemy.exc import IntegrityError

from arena.domain.model.competition import Competition
from arena.domain.model.vote import Vote
from arena.domain.value import CompetitionId, UserId, VoteId
from arena.persistence.repository.inmemory import (
    InMemoryCompetitionRepository,
    InMemoryRegistryRepository,
    InMemoryVoteRepository,
)


def competition(competition_id: int, organizer: str = "0xA11CE", active=True):
    return Competition(
        id=CompetitionId(competition_id),
        title=f"Cup {competition_id}",
        description="Finals",
        game_type="MOBA",
        organizer=UserId(organizer),
        is_active=active,
    )


def vote(vote_id: int, competition_id: int, voter: str = "0xB0B"):
    return Vote(
        id=VoteId(vote_id),
        competition_id=CompetitionId(competition_id),
        voter=UserId(voter),
        choice=True,
        rating=3,
    )


class TestInMemoryCompetitionRepository:
    """Tests for InMemoryCompetitionRepository."""

    @pytest.mark.asyncio
    async def test_next_id_sequence(self):
        repo = InMemoryCompetitionRepository()

        assert [await repo.next_id() for _ in range(3)] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_find_active_excludes_organizer_and_inactive(self):
        repo = InMemoryCompetitionRepository()
        await repo.save(competition(2))
        await repo.save(competition(1, organizer="0xB0B"))
        await repo.save(competition(3, active=False))

        all_active = await repo.find_active()
        foreign = await repo.find_active(exclude_organizer=UserId("0xB0B"))

        assert [c.id for c in all_active] == [1, 2]
        assert [c.id for c in foreign] == [2]

    @pytest.mark.asyncio
    async def test_set_active_and_increment(self):
        repo = InMemoryCompetitionRepository()
        await repo.save(competition(1))

        updated = await repo.set_active(CompetitionId(1), False)
        await repo.increment_vote_count(CompetitionId(1))
        stored = await repo.find_by_id(CompetitionId(1))

        assert updated.is_active is False
        assert stored.is_active is False
        assert stored.vote_count == 1

    @pytest.mark.asyncio
    async def test_set_active_missing(self):
        repo = InMemoryCompetitionRepository()

        assert await repo.set_active(CompetitionId(9), False) is None


class TestInMemoryVoteRepository:
    """Tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_raises_integrity_error(self):
        repo = InMemoryVoteRepository()
        await repo.save(vote(1, 1))

        with pytest.raises(IntegrityError):
            await repo.save(vote(2, 1))

        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_queries(self):
        repo = InMemoryVoteRepository()
        await repo.save(vote(1, 1))
        await repo.save(vote(2, 2))
        await repo.save(vote(3, 1, voter="0xCAFE"))

        voted = await repo.find_voted_competition_ids(
            UserId("0xB0B"), [CompetitionId(1), CompetitionId(2), CompetitionId(3)]
        )

        assert voted == {1, 2}
        assert [v.id for v in await repo.find_by_competition(CompetitionId(1))] == [1, 3]
        assert await repo.count_by_competition(CompetitionId(1)) == 2
        assert (await repo.find_by_id(VoteId(2))).competition_id == 2
        assert await repo.find_by_voter_and_competition(
            UserId("0xCAFE"), CompetitionId(2)
        ) is None


class TestInMemoryRegistryRepository:
    """Tests for InMemoryRegistryRepository."""

    @pytest.mark.asyncio
    async def test_counts_cover_both_stores(self):
        competitions = InMemoryCompetitionRepository()
        votes = InMemoryVoteRepository()
        registry = InMemoryRegistryRepository(competitions, votes)
        await competitions.save(competition(1))
        await competitions.save(competition(2))
        await votes.save(vote(1, 1))

        counts = await registry.counts()

        assert (counts.total_competitions, counts.total_votes) == (2, 1)

    @pytest.mark.asyncio
    async def test_find_open_for_voter(self):
        competitions = InMemoryCompetitionRepository()
        votes = InMemoryVoteRepository()
        registry = InMemoryRegistryRepository(competitions, votes)
        await competitions.save(competition(1))
        await competitions.save(competition(2, organizer="0xB0B"))
        await competitions.save(competition(3, active=False))
        await competitions.save(competition(4))
        await votes.save(vote(1, 1))

        open_for_voter = await registry.find_open_for_voter(UserId("0xB0B"))

        assert [c.id for c in open_for_voter] == [4]
