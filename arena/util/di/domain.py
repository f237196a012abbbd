"""Domain layer DI providers."""

from dishka import Scope, provide

from arena.config import AuthSettings, RegistrySettings
from arena.domain.repository import (
    CompetitionRepository,
    RegistryRepository,
    VoteRepository,
)
from arena.domain.service import (
    CompetitionService,
    EventPublisher,
    JWTService,
    RegistryLock,
    VoteService,
)
from arena.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The registry lock is APP-scoped so every request shares it.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_registry_lock(self) -> RegistryLock:
        """Provide the process-wide registry write lock."""
        return RegistryLock()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_competition_service(
        self,
        competition_repository: CompetitionRepository,
        registry_repository: RegistryRepository,
        event_publisher: EventPublisher,
        registry_lock: RegistryLock,
        registry_settings: RegistrySettings,
    ) -> CompetitionService:
        """Provide competition domain service."""
        return CompetitionService(
            competition_repository=competition_repository,
            registry_repository=registry_repository,
            event_publisher=event_publisher,
            registry_lock=registry_lock,
            registry_settings=registry_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        competition_repository: CompetitionRepository,
        event_publisher: EventPublisher,
        registry_lock: RegistryLock,
        registry_settings: RegistrySettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            competition_repository=competition_repository,
            event_publisher=event_publisher,
            registry_lock=registry_lock,
            registry_settings=registry_settings,
        )
