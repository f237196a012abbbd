"""Application layer DI providers."""

from dishka import Scope, provide

from arena.application.usecase.competition import (
    CreateCompetitionUseCase,
    DeactivateCompetitionUseCase,
    GetCompetitionUseCase,
    ListCompetitionsForVotingUseCase,
    ListUserCompetitionsUseCase,
    ToggleCompetitionStatusUseCase,
)
from arena.application.usecase.registry import GetTotalCountsUseCase
from arena.application.usecase.vote import (
    GetCompetitionVotesUseCase,
    GetVoteUseCase,
    SubmitVoteUseCase,
)
from arena.domain.service import CompetitionService, VoteService
from arena.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Competition use cases
    @provide(scope=Scope.REQUEST)
    def get_create_competition_use_case(
        self, competition_service: CompetitionService
    ) -> CreateCompetitionUseCase:
        """Provide create competition use case."""
        return CreateCompetitionUseCase(competition_service=competition_service)

    @provide(scope=Scope.REQUEST)
    def get_get_competition_use_case(
        self, competition_service: CompetitionService, vote_service: VoteService
    ) -> GetCompetitionUseCase:
        """Provide get competition use case."""
        return GetCompetitionUseCase(
            competition_service=competition_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_competitions_for_voting_use_case(
        self, competition_service: CompetitionService
    ) -> ListCompetitionsForVotingUseCase:
        """Provide list competitions for voting use case."""
        return ListCompetitionsForVotingUseCase(competition_service=competition_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_competitions_use_case(
        self, competition_service: CompetitionService
    ) -> ListUserCompetitionsUseCase:
        """Provide list user competitions use case."""
        return ListUserCompetitionsUseCase(competition_service=competition_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_competition_status_use_case(
        self, competition_service: CompetitionService
    ) -> ToggleCompetitionStatusUseCase:
        """Provide toggle competition status use case."""
        return ToggleCompetitionStatusUseCase(competition_service=competition_service)

    @provide(scope=Scope.REQUEST)
    def get_deactivate_competition_use_case(
        self, competition_service: CompetitionService
    ) -> DeactivateCompetitionUseCase:
        """Provide deactivate competition use case."""
        return DeactivateCompetitionUseCase(competition_service=competition_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(self, vote_service: VoteService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_competition_votes_use_case(
        self, vote_service: VoteService
    ) -> GetCompetitionVotesUseCase:
        """Provide get competition votes use case."""
        return GetCompetitionVotesUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    # Registry use cases
    @provide(scope=Scope.REQUEST)
    def get_get_total_counts_use_case(
        self, competition_service: CompetitionService
    ) -> GetTotalCountsUseCase:
        """Provide get total counts use case."""
        return GetTotalCountsUseCase(competition_service=competition_service)
