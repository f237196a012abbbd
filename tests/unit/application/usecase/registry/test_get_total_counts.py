"""Unit tests for GetTotalCountsUseCase."""

import pytest

from arena.application.usecase.competition import (
    CreateCompetitionRequest,
    CreateCompetitionUseCase,
)
from arena.application.usecase.registry import GetTotalCountsUseCase
from arena.application.usecase.vote import SubmitVoteRequest, SubmitVoteUseCase
from tests.conftest import ORGANIZER, VOTER
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_counts_start_at_zero(unit_env):
    use_case = await unit_env.get(GetTotalCountsUseCase)

    response = await use_case.execute()

    assert response.total_competitions == 0
    assert response.total_votes == 0


@pytest.mark.asyncio
async def test_counts_after_activity(unit_env):
    create = await unit_env.get(CreateCompetitionUseCase)
    submit = await unit_env.get(SubmitVoteUseCase)
    for title in ("Cup", "Open"):
        await create.execute(
            CreateCompetitionRequest(
                title=title, description="Finals", game_type="MOBA", organizer=ORGANIZER
            )
        )
    await submit.execute(
        SubmitVoteRequest(competition_id=2, voter=VOTER, choice=False, rating=2)
    )
    use_case = await unit_env.get(GetTotalCountsUseCase)

    response = await use_case.execute()

    assert response.total_competitions == 2
    assert response.total_votes == 1
