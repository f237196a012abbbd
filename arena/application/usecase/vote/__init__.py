"""Vote use cases."""

from .common import VoteItem
from .get_competition_votes import (
    GetCompetitionVotesRequest,
    GetCompetitionVotesResponse,
    GetCompetitionVotesUseCase,
)
from .get_vote import GetVoteRequest, GetVoteResponse, GetVoteUseCase
from .submit_vote import SubmitVoteRequest, SubmitVoteResponse, SubmitVoteUseCase

__all__ = [
    "GetCompetitionVotesRequest",
    "GetCompetitionVotesResponse",
    "GetCompetitionVotesUseCase",
    "GetVoteRequest",
    "GetVoteResponse",
    "GetVoteUseCase",
    "SubmitVoteRequest",
    "SubmitVoteResponse",
    "SubmitVoteUseCase",
    "VoteItem",
]
