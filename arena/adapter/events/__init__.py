"""Registry event publisher adapters."""

from .publisher import (
    AfterCommitEventPublisher,
    InMemoryEventPublisher,
    LogfireEventPublisher,
)

__all__ = [
    "AfterCommitEventPublisher",
    "InMemoryEventPublisher",
    "LogfireEventPublisher",
]
