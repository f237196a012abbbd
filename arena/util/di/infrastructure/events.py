"""Event publishing infrastructure providers."""

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession

from arena.adapter.events import AfterCommitEventPublisher, LogfireEventPublisher
from arena.domain.service import EventPublisher
from arena.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """Events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Production events provider publishing through Logfire.

    Needs the request session, so it runs alongside production persistence.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_logfire_publisher(self) -> LogfireEventPublisher:
        return LogfireEventPublisher(service_name="arena-registry")

    @provide(scope=Scope.REQUEST)
    def get_event_publisher(
        self, target: LogfireEventPublisher, session: AsyncSession
    ) -> EventPublisher:
        """Provide a publisher that delivers once the request commits."""
        return AfterCommitEventPublisher(target, session.sync_session)
