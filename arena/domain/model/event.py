"""Registry notification events.

Emitted after each successful mutation for external subscribers
(UIs, indexers). Events carry the new id and the key attributes.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from arena.domain.model.common import DomainModel
from arena.domain.value import CompetitionId, CompetitionStatusChange, UserId, VoteId


class RegistryEvent(DomainModel):
    """Base class for registry events."""

    name: ClassVar[str] = "RegistryEvent"

    occurred_at: datetime = Field(default_factory=datetime.now)


class CompetitionCreated(RegistryEvent):
    """A competition was created."""

    name: ClassVar[str] = "CompetitionCreated"

    competition_id: CompetitionId
    title: str
    game_type: str
    organizer: UserId


class VoteSubmitted(RegistryEvent):
    """A vote was cast on a competition."""

    name: ClassVar[str] = "VoteSubmitted"

    vote_id: VoteId
    competition_id: CompetitionId
    voter: UserId
    choice: bool
    rating: int


class CompetitionStatusChanged(RegistryEvent):
    """A competition's active flag was toggled or forced off."""

    name: ClassVar[str] = "CompetitionStatusChanged"

    competition_id: CompetitionId
    is_active: bool
    changed_by: UserId
    change: CompetitionStatusChange
