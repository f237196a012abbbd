"""Submit vote use case."""

from pydantic import BaseModel

from arena.application.usecase.base import BaseUseCase
from arena.domain.service import VoteService
from arena.domain.value import CompetitionId, UserId

from .common import VoteItem


class SubmitVoteRequest(BaseModel):
    """Submit vote request."""

    competition_id: int
    voter: str  # Caller identity from authenticated user
    choice: bool
    rating: int
    comment: str | None = None


class SubmitVoteResponse(BaseModel):
    """Submit vote response."""

    vote: VoteItem


class SubmitVoteUseCase(BaseUseCase[SubmitVoteRequest, SubmitVoteResponse]):
    """Use case for casting a vote on a competition."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Args:
            request: Submit vote request

        Returns:
            Submitted vote details

        Raises:
            NotFoundError: If the competition doesn't exist
            InactiveResourceError: If the competition is inactive
            ForbiddenError: If the voter organizes the competition
            ConflictError: If the voter already voted
            InvalidInputError: If rating is outside 1-5
        """
        vote = await self.vote_service.submit_vote(
            competition_id=CompetitionId(request.competition_id),
            voter=UserId(request.voter),
            choice=request.choice,
            rating=request.rating,
            comment=request.comment,
        )
        return SubmitVoteResponse(vote=VoteItem.from_domain(vote))
