"""Get competition votes use case."""

from pydantic import BaseModel

from arena.application.usecase.base import BaseUseCase
from arena.domain.service import VoteService
from arena.domain.value import CompetitionId, UserId

from .common import VoteItem


class GetCompetitionVotesRequest(BaseModel):
    """Get competition votes request."""

    competition_id: int
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCompetitionVotesResponse(BaseModel):
    """Get competition votes response."""

    votes: list[VoteItem]
    total: int


class GetCompetitionVotesUseCase(
    BaseUseCase[GetCompetitionVotesRequest, GetCompetitionVotesResponse]
):
    """Use case for listing the votes cast on a competition."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(
        self, request: GetCompetitionVotesRequest
    ) -> GetCompetitionVotesResponse:
        """List votes in submission order, subject to the visibility policy."""
        caller = UserId(request.user_id) if request.user_id else None
        votes = await self.vote_service.list_votes(
            CompetitionId(request.competition_id), caller
        )
        return GetCompetitionVotesResponse(
            votes=[VoteItem.from_domain(v) for v in votes],
            total=len(votes),
        )
