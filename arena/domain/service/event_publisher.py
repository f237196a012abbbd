"""Registry event publishing interface."""

from arena.domain.model.event import RegistryEvent


class EventPublisher:
    """Generic publisher interface for registry notification events.

    Delivery is fire-and-forget and ordered per publisher. Services publish
    while the request transaction is still open, so a publisher feeding
    consumers outside the process must hold events until that transaction
    commits and drop them if it rolls back.
    """

    async def publish(self, event: RegistryEvent) -> None:
        """Publish an event to subscribers.

        Args:
            event: Event emitted by a successful mutation
        """
        raise NotImplementedError
