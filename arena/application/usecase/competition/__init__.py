"""Competition use cases."""

from .change_status import (
    ChangeCompetitionStatusRequest,
    ChangeCompetitionStatusResponse,
    DeactivateCompetitionUseCase,
    ToggleCompetitionStatusUseCase,
)
from .common import CompetitionItem
from .create_competition import (
    CreateCompetitionRequest,
    CreateCompetitionResponse,
    CreateCompetitionUseCase,
)
from .get_competition import (
    GetCompetitionRequest,
    GetCompetitionResponse,
    GetCompetitionUseCase,
)
from .list_competitions import (
    ListCompetitionsForVotingUseCase,
    ListCompetitionsRequest,
    ListCompetitionsResponse,
    ListUserCompetitionsUseCase,
)

__all__ = [
    "ChangeCompetitionStatusRequest",
    "ChangeCompetitionStatusResponse",
    "CompetitionItem",
    "CreateCompetitionRequest",
    "CreateCompetitionResponse",
    "CreateCompetitionUseCase",
    "DeactivateCompetitionUseCase",
    "GetCompetitionRequest",
    "GetCompetitionResponse",
    "GetCompetitionUseCase",
    "ListCompetitionsForVotingUseCase",
    "ListCompetitionsRequest",
    "ListCompetitionsResponse",
    "ListUserCompetitionsUseCase",
    "ToggleCompetitionStatusUseCase",
]
