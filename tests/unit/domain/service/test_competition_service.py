"""Unit tests for CompetitionService."""

import pytest

from arena.domain.error import ForbiddenError, InvalidInputError, NotFoundError
from arena.domain.model.event import CompetitionCreated, CompetitionStatusChanged
from arena.domain.repository import CompetitionRepository
from arena.domain.service import CompetitionService, EventPublisher, VoteService
from arena.domain.value import CompetitionId, CompetitionStatusChange, UserId
from tests.conftest import ORGANIZER, OTHER_VOTER, OWNER, VOTER
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create(service: CompetitionService, organizer: str = ORGANIZER, title="Cup"):
    return await service.create_competition(
        organizer=UserId(organizer),
        title=title,
        description="Finals",
        game_type="MOBA",
    )


class TestCreateCompetition:
    """Tests for create_competition method."""

    @pytest.mark.asyncio
    async def test_first_competition_gets_id_one(self, unit_env):
        """First competition should get ID 1 with zero votes, active."""
        # Arrange
        service = await unit_env.get(CompetitionService)

        # Act
        competition = await create(service)

        # Assert
        assert competition.id == 1
        assert competition.title == "Cup"
        assert competition.description == "Finals"
        assert competition.game_type == "MOBA"
        assert competition.organizer == ORGANIZER
        assert competition.vote_count == 0
        assert competition.is_active is True

    @pytest.mark.asyncio
    async def test_ids_are_sequential(self, unit_env):
        """Consecutive creations should get consecutive IDs."""
        service = await unit_env.get(CompetitionService)

        ids = [(await create(service, title=f"Cup {i}")).id for i in range(3)]

        assert ids == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_text_fields_are_trimmed(self, unit_env):
        """Surrounding whitespace should be stripped before storing."""
        service = await unit_env.get(CompetitionService)

        competition = await service.create_competition(
            organizer=UserId(ORGANIZER),
            title="  Cup  ",
            description="\tFinals\n",
            game_type=" MOBA",
        )

        assert competition.title == "Cup"
        assert competition.description == "Finals"
        assert competition.game_type == "MOBA"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["title", "description", "game_type"])
    async def test_empty_field_rejected_without_consuming_id(self, unit_env, field):
        """An empty field should be rejected and leave the ID counter untouched."""
        # Arrange
        service = await unit_env.get(CompetitionService)
        repo = await unit_env.get(CompetitionRepository)
        fields = {"title": "Cup", "description": "Finals", "game_type": "MOBA"}
        fields[field] = "   "

        # Act & Assert
        with pytest.raises(InvalidInputError, match=field):
            await service.create_competition(organizer=UserId(ORGANIZER), **fields)

        assert await repo.count() == 0
        competition = await create(service)
        assert competition.id == 1

    @pytest.mark.asyncio
    async def test_publishes_created_event(self, unit_env):
        """Creating a competition should emit CompetitionCreated."""
        service = await unit_env.get(CompetitionService)
        publisher = await unit_env.get(EventPublisher)

        competition = await create(service)

        assert len(publisher.events) == 1
        event = publisher.events[0]
        assert isinstance(event, CompetitionCreated)
        assert event.competition_id == competition.id
        assert event.organizer == ORGANIZER
        assert event.game_type == "MOBA"

    @pytest.mark.asyncio
    async def test_rejected_creation_publishes_nothing(self, unit_env):
        """A failed call should not emit events."""
        service = await unit_env.get(CompetitionService)
        publisher = await unit_env.get(EventPublisher)

        with pytest.raises(InvalidInputError):
            await create(service, title="")

        assert publisher.events == []


class TestGetCompetition:
    """Tests for get_competition method."""

    @pytest.mark.asyncio
    async def test_returns_existing(self, unit_env):
        service = await unit_env.get(CompetitionService)
        created = await create(service)

        assert await service.get_competition(created.id) == created

    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self, unit_env):
        service = await unit_env.get(CompetitionService)

        with pytest.raises(NotFoundError):
            await service.get_competition(CompetitionId(42))


class TestToggleStatus:
    """Tests for toggle_status method."""

    @pytest.mark.asyncio
    async def test_organizer_toggles_back_and_forth(self, unit_env):
        """Toggling twice should restore the original state."""
        service = await unit_env.get(CompetitionService)
        competition = await create(service)

        first = await service.toggle_status(UserId(ORGANIZER), competition.id)
        second = await service.toggle_status(UserId(ORGANIZER), competition.id)

        assert first.is_active is False
        assert second.is_active is True
        assert (await service.get_competition(competition.id)).is_active is True

    @pytest.mark.asyncio
    async def test_non_organizer_forbidden(self, unit_env):
        """Only the organizer can toggle, registry owners included."""
        service = await unit_env.get(CompetitionService)
        competition = await create(service)

        for caller in (VOTER, OWNER):
            with pytest.raises(ForbiddenError):
                await service.toggle_status(UserId(caller), competition.id)

        assert (await service.get_competition(competition.id)).is_active is True

    @pytest.mark.asyncio
    async def test_missing_competition_not_found(self, unit_env):
        """Existence is checked before authorization."""
        service = await unit_env.get(CompetitionService)

        with pytest.raises(NotFoundError):
            await service.toggle_status(UserId(VOTER), CompetitionId(7))

    @pytest.mark.asyncio
    async def test_publishes_status_changed_event(self, unit_env):
        service = await unit_env.get(CompetitionService)
        publisher = await unit_env.get(EventPublisher)
        competition = await create(service)

        await service.toggle_status(UserId(ORGANIZER), competition.id)

        event = publisher.events[-1]
        assert isinstance(event, CompetitionStatusChanged)
        assert event.is_active is False
        assert event.changed_by == ORGANIZER
        assert event.change == CompetitionStatusChange.TOGGLED

    @pytest.mark.asyncio
    async def test_vote_count_preserved(self, unit_env):
        """Toggling should not touch vote_count."""
        service = await unit_env.get(CompetitionService)
        vote_service = await unit_env.get(VoteService)
        competition = await create(service)
        await vote_service.submit_vote(competition.id, UserId(VOTER), True, 4)

        toggled = await service.toggle_status(UserId(ORGANIZER), competition.id)

        assert toggled.vote_count == 1


class TestDeactivate:
    """Tests for deactivate method."""

    @pytest.mark.asyncio
    async def test_owner_deactivates(self, unit_env):
        service = await unit_env.get(CompetitionService)
        publisher = await unit_env.get(EventPublisher)
        competition = await create(service)

        result = await service.deactivate(UserId(OWNER), competition.id)

        assert result.is_active is False
        event = publisher.events[-1]
        assert isinstance(event, CompetitionStatusChanged)
        assert event.change == CompetitionStatusChange.DEACTIVATED
        assert event.changed_by == OWNER

    @pytest.mark.asyncio
    async def test_deactivate_is_idempotent(self, unit_env):
        """Deactivating an inactive competition leaves it inactive."""
        service = await unit_env.get(CompetitionService)
        competition = await create(service)

        await service.deactivate(UserId(OWNER), competition.id)
        result = await service.deactivate(UserId(OWNER), competition.id)

        assert result.is_active is False

    @pytest.mark.asyncio
    async def test_organizer_cannot_deactivate(self, unit_env):
        """Organizers must use toggle; deactivate is owner-only."""
        service = await unit_env.get(CompetitionService)
        competition = await create(service)

        with pytest.raises(ForbiddenError):
            await service.deactivate(UserId(ORGANIZER), competition.id)

        assert (await service.get_competition(competition.id)).is_active is True

    @pytest.mark.asyncio
    async def test_missing_competition_not_found(self, unit_env):
        service = await unit_env.get(CompetitionService)

        with pytest.raises(NotFoundError):
            await service.deactivate(UserId(OWNER), CompetitionId(1))

    @pytest.mark.asyncio
    async def test_is_registry_owner(self, unit_env):
        service = await unit_env.get(CompetitionService)

        assert service.is_registry_owner(UserId(OWNER)) is True
        assert service.is_registry_owner(UserId(ORGANIZER)) is False


class TestListings:
    """Tests for list_for_voting, list_organized and get_counts."""

    @pytest.mark.asyncio
    async def test_list_for_voting_filters(self, unit_env):
        """Only active, foreign, not-yet-voted competitions are listed."""
        # Arrange
        service = await unit_env.get(CompetitionService)
        vote_service = await unit_env.get(VoteService)
        own = await create(service, organizer=VOTER, title="Own")
        voted = await create(service, title="Voted")
        inactive = await create(service, title="Inactive")
        open_one = await create(service, title="Open")
        open_two = await create(service, organizer=OTHER_VOTER, title="Open 2")

        await vote_service.submit_vote(voted.id, UserId(VOTER), True, 3)
        await service.toggle_status(UserId(ORGANIZER), inactive.id)

        # Act
        result = await service.list_for_voting(UserId(VOTER))

        # Assert
        assert [c.id for c in result] == [open_one.id, open_two.id]
        assert own.id not in [c.id for c in result]

    @pytest.mark.asyncio
    async def test_list_for_voting_empty(self, unit_env):
        service = await unit_env.get(CompetitionService)

        assert await service.list_for_voting(UserId(VOTER)) == []

    @pytest.mark.asyncio
    async def test_list_organized_includes_inactive(self, unit_env):
        """Organizer listing includes inactive competitions in creation order."""
        service = await unit_env.get(CompetitionService)
        first = await create(service, title="First")
        await create(service, organizer=VOTER, title="Other")
        second = await create(service, title="Second")
        await service.toggle_status(UserId(ORGANIZER), first.id)

        result = await service.list_organized(UserId(ORGANIZER))

        assert [c.id for c in result] == [first.id, second.id]
        assert result[0].is_active is False

    @pytest.mark.asyncio
    async def test_list_organized_unknown_identity(self, unit_env):
        service = await unit_env.get(CompetitionService)

        assert await service.list_organized(UserId("0xNOBODY")) == []

    @pytest.mark.asyncio
    async def test_counts(self, unit_env):
        """Counts should track competitions and votes."""
        service = await unit_env.get(CompetitionService)
        vote_service = await unit_env.get(VoteService)

        empty = await service.get_counts()
        a = await create(service)
        b = await create(service, title="Second")
        await vote_service.submit_vote(a.id, UserId(VOTER), True, 5)
        await vote_service.submit_vote(b.id, UserId(VOTER), False, 1)
        await vote_service.submit_vote(a.id, UserId(OTHER_VOTER), True, 2)
        counts = await service.get_counts()

        assert (empty.total_competitions, empty.total_votes) == (0, 0)
        assert counts.total_competitions == 2
        assert counts.total_votes == 3
