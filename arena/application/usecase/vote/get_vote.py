"""Get vote use case."""

from pydantic import BaseModel

from arena.application.usecase.base import BaseUseCase
from arena.domain.service import VoteService
from arena.domain.value import UserId, VoteId

from .common import VoteItem


class GetVoteRequest(BaseModel):
    """Get vote request."""

    vote_id: int
    user_id: str | None = None  # Current user ID (if authenticated)


class GetVoteResponse(BaseModel):
    """Get vote response."""

    vote: VoteItem


class GetVoteUseCase(BaseUseCase[GetVoteRequest, GetVoteResponse]):
    """Use case for reading a single vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        caller = UserId(request.user_id) if request.user_id else None
        vote = await self.vote_service.get_vote(VoteId(request.vote_id), caller)
        return GetVoteResponse(vote=VoteItem.from_domain(vote))
