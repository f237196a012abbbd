"""Get total counts use case."""

from pydantic import BaseModel

from arena.domain.service import CompetitionService


class GetTotalCountsResponse(BaseModel):
    """Registry totals response."""

    total_competitions: int
    total_votes: int


class GetTotalCountsUseCase:
    """Use case for reading the registry's competition and vote totals."""

    def __init__(self, competition_service: CompetitionService) -> None:
        self.competition_service = competition_service

    async def execute(self) -> GetTotalCountsResponse:
        counts = await self.competition_service.get_counts()
        return GetTotalCountsResponse(
            total_competitions=counts.total_competitions,
            total_votes=counts.total_votes,
        )
