"""Registry event publishers.

The production publisher writes each event as a structured Logfire record,
which downstream indexers consume from the telemetry pipeline. It is wrapped
per request in ``AfterCommitEventPublisher`` so records only appear once the
mutation is durable. The in-memory publisher keeps an ordered log and fans
out to in-process subscribers; it is used by tests and local tooling.
"""

from collections.abc import Awaitable, Callable

import logfire
from sqlalchemy.event import listen
from sqlalchemy.orm import Session

from arena.domain.model.event import RegistryEvent
from arena.domain.service.event_publisher import EventPublisher

Subscriber = Callable[[RegistryEvent], Awaitable[None]]


class LogfireEventPublisher(EventPublisher):
    """Publish registry events as Logfire records."""

    def __init__(self, service_name: str) -> None:
        """Initialize publisher.

        Args:
            service_name: Emitter name attached to every event record
        """
        self.service_name = service_name

    async def publish(self, event: RegistryEvent) -> None:
        """Emit the event as a structured log record."""
        self.record(event)

    def record(self, event: RegistryEvent) -> None:
        logfire.info(
            "Registry event {event_name}",
            event_name=event.name,
            emitter=self.service_name,
            **event.model_dump(mode="json"),
        )


class AfterCommitEventPublisher(EventPublisher):
    """Hold a request's events until its transaction commits.

    Pending events are handed to the target from the session's
    ``after_commit`` hook in emission order. A rollback drops them, so no
    record is written for a mutation that never became durable.
    """

    def __init__(self, target: LogfireEventPublisher, session: Session) -> None:
        """Initialize publisher.

        Args:
            target: Publisher receiving events once committed
            session: Sync session of the request transaction
        """
        self.target = target
        self.pending: list[RegistryEvent] = []
        listen(session, "after_commit", self._after_commit)
        listen(session, "after_rollback", self._after_rollback)

    async def publish(self, event: RegistryEvent) -> None:
        """Queue the event until commit."""
        self.pending.append(event)

    def _after_commit(self, session: Session) -> None:
        pending, self.pending = self.pending, []
        for event in pending:
            self.target.record(event)

    def _after_rollback(self, session: Session) -> None:
        if self.pending:
            logfire.warn(
                "Registry events dropped on rollback",
                event_names=[event.name for event in self.pending],
            )
        self.pending = []


class InMemoryEventPublisher(EventPublisher):
    """In-memory publisher for testing.

    Events are appended to ``events`` in emission order and delivered to
    each subscriber in registration order.
    """

    def __init__(self) -> None:
        self.events: list[RegistryEvent] = []
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        """Register an async callback invoked for every published event."""
        self._subscribers.append(subscriber)

    async def publish(self, event: RegistryEvent) -> None:
        """Record the event and deliver it to subscribers.

        A failing subscriber is logged and skipped; the mutation that emitted
        the event has already been applied.
        """
        self.events.append(event)
        for subscriber in self._subscribers:
            try:
                await subscriber(event)
            except Exception:
                logfire.exception("Event subscriber failed", event_name=event.name)
