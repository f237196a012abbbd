"""Competition routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from arena.application.usecase.competition import (
    ChangeCompetitionStatusRequest,
    ChangeCompetitionStatusResponse,
    CreateCompetitionRequest,
    CreateCompetitionResponse,
    CreateCompetitionUseCase,
    DeactivateCompetitionUseCase,
    GetCompetitionRequest,
    GetCompetitionResponse,
    GetCompetitionUseCase,
    ListCompetitionsForVotingUseCase,
    ListCompetitionsRequest,
    ListCompetitionsResponse,
    ListUserCompetitionsUseCase,
    ToggleCompetitionStatusUseCase,
)
from arena.domain.service import JWTService
from arena.interface.api.auth import require_caller, resolve_caller

router = APIRouter(prefix="/competitions", tags=["competitions"], route_class=DishkaRoute)


class CreateCompetitionAPIRequest(BaseModel):
    """API request for creating a competition.

    Emptiness is checked by the registry after trimming whitespace.
    """

    title: str
    description: str
    game_type: str


@router.post(
    "",
    response_model=CreateCompetitionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_competition(
    request: CreateCompetitionAPIRequest,
    create_competition_use_case: FromDishka[CreateCompetitionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCompetitionResponse:
    """Create a new competition organized by the caller.

    Requires authentication.
    """
    user_id = require_caller(jwt_service, auth_token, authorization)
    return await create_competition_use_case.execute(
        CreateCompetitionRequest(
            title=request.title,
            description=request.description,
            game_type=request.game_type,
            organizer=user_id,
        )
    )


@router.get("", response_model=ListCompetitionsResponse)
async def list_competitions_for_voting(
    list_use_case: FromDishka[ListCompetitionsForVotingUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCompetitionsResponse:
    """List active competitions the caller can still vote on.

    Requires authentication.
    """
    user_id = require_caller(jwt_service, auth_token, authorization)
    return await list_use_case.execute(ListCompetitionsRequest(user_id=user_id))


@router.get("/mine", response_model=ListCompetitionsResponse)
async def list_user_competitions(
    list_use_case: FromDishka[ListUserCompetitionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCompetitionsResponse:
    """List the competitions organized by the caller.

    Requires authentication.
    """
    user_id = require_caller(jwt_service, auth_token, authorization)
    return await list_use_case.execute(ListCompetitionsRequest(user_id=user_id))


@router.get("/{competition_id}", response_model=GetCompetitionResponse)
async def get_competition(
    competition_id: int,
    get_competition_use_case: FromDishka[GetCompetitionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCompetitionResponse:
    """Get a competition by ID.

    Authentication is optional; when present, has_voted reflects the caller.
    """
    user_id = resolve_caller(jwt_service, auth_token, authorization)
    return await get_competition_use_case.execute(
        GetCompetitionRequest(competition_id=competition_id, user_id=user_id)
    )


@router.post(
    "/{competition_id}/toggle", response_model=ChangeCompetitionStatusResponse
)
async def toggle_competition_status(
    competition_id: int,
    toggle_use_case: FromDishka[ToggleCompetitionStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ChangeCompetitionStatusResponse:
    """Flip the active flag of a competition.

    Only the organizer may toggle.
    """
    user_id = require_caller(jwt_service, auth_token, authorization)
    return await toggle_use_case.execute(
        ChangeCompetitionStatusRequest(competition_id=competition_id, user_id=user_id)
    )


@router.post(
    "/{competition_id}/deactivate", response_model=ChangeCompetitionStatusResponse
)
async def deactivate_competition(
    competition_id: int,
    deactivate_use_case: FromDishka[DeactivateCompetitionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ChangeCompetitionStatusResponse:
    """Force a competition inactive.

    Only registry owners may deactivate.
    """
    user_id = require_caller(jwt_service, auth_token, authorization)
    return await deactivate_use_case.execute(
        ChangeCompetitionStatusRequest(competition_id=competition_id, user_id=user_id)
    )
