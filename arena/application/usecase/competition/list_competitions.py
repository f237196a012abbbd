"""List competitions use cases."""

from pydantic import BaseModel

from arena.application.usecase.base import BaseUseCase
from arena.domain.service import CompetitionService
from arena.domain.value import UserId

from .common import CompetitionItem


class ListCompetitionsRequest(BaseModel):
    """List competitions request."""

    user_id: str  # Caller identity from authenticated user


class ListCompetitionsResponse(BaseModel):
    """List competitions response."""

    competitions: list[CompetitionItem]
    total: int


class ListCompetitionsForVotingUseCase(
    BaseUseCase[ListCompetitionsRequest, ListCompetitionsResponse]
):
    """Use case for listing competitions the caller can still vote on."""

    def __init__(self, competition_service: CompetitionService) -> None:
        self.competition_service = competition_service

    async def execute(
        self, request: ListCompetitionsRequest
    ) -> ListCompetitionsResponse:
        """List active competitions not organized or voted on by the caller."""
        competitions = await self.competition_service.list_for_voting(
            UserId(request.user_id)
        )
        return ListCompetitionsResponse(
            competitions=[CompetitionItem.from_domain(c) for c in competitions],
            total=len(competitions),
        )


class ListUserCompetitionsUseCase(
    BaseUseCase[ListCompetitionsRequest, ListCompetitionsResponse]
):
    """Use case for listing the competitions a caller organizes."""

    def __init__(self, competition_service: CompetitionService) -> None:
        self.competition_service = competition_service

    async def execute(
        self, request: ListCompetitionsRequest
    ) -> ListCompetitionsResponse:
        """List the caller's competitions in creation order."""
        competitions = await self.competition_service.list_organized(
            UserId(request.user_id)
        )
        return ListCompetitionsResponse(
            competitions=[CompetitionItem.from_domain(c) for c in competitions],
            total=len(competitions),
        )
