"""Competition aggregate root.

A competition is a votable entity created by an organizer. It is never
deleted; only its active flag and vote counter change after creation.
"""

from datetime import datetime

from pydantic import Field

from arena.domain.model.common import DomainModel
from arena.domain.value import CompetitionId, UserId


class Competition(DomainModel):
    """Competition aggregate root.

    Business rules:
    - The organizer is fixed at creation and is the only identity allowed
      to toggle the active flag
    - The organizer may never vote on their own competition
    - vote_count always equals the number of votes stored for it
    """

    id: CompetitionId = Field(ge=1)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    game_type: str = Field(min_length=1)
    organizer: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    vote_count: int = Field(default=0, ge=0)
    is_active: bool = True

    def is_organized_by(self, user_id: UserId) -> bool:
        """Check whether the given identity created this competition."""
        return self.organizer == user_id
