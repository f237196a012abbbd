"""Create competition use case."""

from pydantic import BaseModel

from arena.application.usecase.base import BaseUseCase
from arena.domain.service import CompetitionService
from arena.domain.value import UserId

from .common import CompetitionItem


class CreateCompetitionRequest(BaseModel):
    """Create competition request."""

    title: str
    description: str
    game_type: str
    organizer: str  # Caller identity from authenticated user


class CreateCompetitionResponse(BaseModel):
    """Create competition response."""

    competition: CompetitionItem


class CreateCompetitionUseCase(
    BaseUseCase[CreateCompetitionRequest, CreateCompetitionResponse]
):
    """Use case for creating a competition."""

    def __init__(self, competition_service: CompetitionService) -> None:
        """Initialize create competition use case.

        Args:
            competition_service: Competition domain service
        """
        self.competition_service = competition_service

    async def execute(
        self, request: CreateCompetitionRequest
    ) -> CreateCompetitionResponse:
        """Execute create competition flow.

        Args:
            request: Create competition request

        Returns:
            Created competition

        Raises:
            InvalidInputError: If title, description or game type is empty
        """
        competition = await self.competition_service.create_competition(
            organizer=UserId(request.organizer),
            title=request.title,
            description=request.description,
            game_type=request.game_type,
        )
        return CreateCompetitionResponse(
            competition=CompetitionItem.from_domain(competition)
        )
