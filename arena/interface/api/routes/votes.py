"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from arena.application.usecase.vote import (
    GetCompetitionVotesRequest,
    GetCompetitionVotesResponse,
    GetCompetitionVotesUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)
from arena.domain.service import JWTService
from arena.interface.api.auth import require_caller, resolve_caller

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class SubmitVoteAPIRequest(BaseModel):
    """API request for casting a vote.

    The rating range is enforced by the registry so that the existence,
    status and ownership checks are reported first.
    """

    choice: bool
    rating: int
    comment: str | None = Field(default=None, max_length=1000)


@router.post(
    "/competitions/{competition_id}/votes",
    response_model=SubmitVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_vote(
    competition_id: int,
    request: SubmitVoteAPIRequest,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SubmitVoteResponse:
    """Cast a vote on a competition.

    Requires authentication.
    """
    user_id = require_caller(jwt_service, auth_token, authorization)
    return await submit_vote_use_case.execute(
        SubmitVoteRequest(
            competition_id=competition_id,
            voter=user_id,
            choice=request.choice,
            rating=request.rating,
            comment=request.comment,
        )
    )


@router.get(
    "/competitions/{competition_id}/votes",
    response_model=GetCompetitionVotesResponse,
)
async def get_competition_votes(
    competition_id: int,
    get_votes_use_case: FromDishka[GetCompetitionVotesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCompetitionVotesResponse:
    """List the votes cast on a competition in submission order.

    Depending on REGISTRY__VOTE_VISIBILITY, only the organizer and registry
    owners may read them.
    """
    user_id = resolve_caller(jwt_service, auth_token, authorization)
    return await get_votes_use_case.execute(
        GetCompetitionVotesRequest(competition_id=competition_id, user_id=user_id)
    )


@router.get("/votes/{vote_id}", response_model=GetVoteResponse)
async def get_vote(
    vote_id: int,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetVoteResponse:
    """Get a single vote by ID.

    The voter can always read their own vote; otherwise the vote visibility
    policy applies.
    """
    user_id = resolve_caller(jwt_service, auth_token, authorization)
    return await get_vote_use_case.execute(
        GetVoteRequest(vote_id=vote_id, user_id=user_id)
    )
