"""Competition status use cases."""

from pydantic import BaseModel

from arena.application.usecase.base import BaseUseCase
from arena.domain.service import CompetitionService
from arena.domain.value import CompetitionId, UserId

from .common import CompetitionItem


class ChangeCompetitionStatusRequest(BaseModel):
    """Competition status change request."""

    competition_id: int
    user_id: str  # Caller identity from authenticated user


class ChangeCompetitionStatusResponse(BaseModel):
    """Competition status change response."""

    competition: CompetitionItem


class ToggleCompetitionStatusUseCase(
    BaseUseCase[ChangeCompetitionStatusRequest, ChangeCompetitionStatusResponse]
):
    """Use case for an organizer flipping their competition's active flag."""

    def __init__(self, competition_service: CompetitionService) -> None:
        """Initialize toggle status use case.

        Args:
            competition_service: Competition domain service
        """
        self.competition_service = competition_service

    async def execute(
        self, request: ChangeCompetitionStatusRequest
    ) -> ChangeCompetitionStatusResponse:
        """Execute toggle flow.

        Raises:
            NotFoundError: If the competition doesn't exist
            ForbiddenError: If caller is not the organizer
        """
        competition = await self.competition_service.toggle_status(
            UserId(request.user_id), CompetitionId(request.competition_id)
        )
        return ChangeCompetitionStatusResponse(
            competition=CompetitionItem.from_domain(competition)
        )


class DeactivateCompetitionUseCase(
    BaseUseCase[ChangeCompetitionStatusRequest, ChangeCompetitionStatusResponse]
):
    """Use case for a registry owner forcing a competition inactive."""

    def __init__(self, competition_service: CompetitionService) -> None:
        """Initialize deactivate use case.

        Args:
            competition_service: Competition domain service
        """
        self.competition_service = competition_service

    async def execute(
        self, request: ChangeCompetitionStatusRequest
    ) -> ChangeCompetitionStatusResponse:
        """Execute deactivation flow.

        Raises:
            NotFoundError: If the competition doesn't exist
            ForbiddenError: If caller is not a registry owner
        """
        competition = await self.competition_service.deactivate(
            UserId(request.user_id), CompetitionId(request.competition_id)
        )
        return ChangeCompetitionStatusResponse(
            competition=CompetitionItem.from_domain(competition)
        )
