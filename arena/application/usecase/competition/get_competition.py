"""Get competition use case."""

from pydantic import BaseModel

from arena.application.usecase.base import BaseUseCase
from arena.domain.service import CompetitionService, VoteService
from arena.domain.value import CompetitionId, UserId

from .common import CompetitionItem


class GetCompetitionRequest(BaseModel):
    """Get competition request."""

    competition_id: int
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCompetitionResponse(BaseModel):
    """Get competition response."""

    competition: CompetitionItem
    has_voted: bool


class GetCompetitionUseCase(
    BaseUseCase[GetCompetitionRequest, GetCompetitionResponse]
):
    """Use case for reading a single competition."""

    def __init__(
        self, competition_service: CompetitionService, vote_service: VoteService
    ) -> None:
        """Initialize get competition use case.

        Args:
            competition_service: Competition domain service
            vote_service: Vote domain service
        """
        self.competition_service = competition_service
        self.vote_service = vote_service

    async def execute(self, request: GetCompetitionRequest) -> GetCompetitionResponse:
        """Execute get competition flow.

        Raises:
            NotFoundError: If the competition doesn't exist
        """
        competition_id = CompetitionId(request.competition_id)
        competition = await self.competition_service.get_competition(competition_id)

        has_voted = False
        if request.user_id:
            has_voted = await self.vote_service.has_voted(
                UserId(request.user_id), competition_id
            )

        return GetCompetitionResponse(
            competition=CompetitionItem.from_domain(competition),
            has_voted=has_voted,
        )
