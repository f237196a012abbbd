"""Shared competition response models."""

from datetime import datetime

from pydantic import BaseModel

from arena.domain.model import Competition


class CompetitionItem(BaseModel):
    """Competition as returned to callers."""

    competition_id: int
    title: str
    description: str
    game_type: str
    organizer: str
    created_at: datetime
    vote_count: int
    is_active: bool

    @classmethod
    def from_domain(cls, competition: Competition) -> "CompetitionItem":
        """Build a response item from a domain competition."""
        return cls(
            competition_id=competition.id,
            title=competition.title,
            description=competition.description,
            game_type=competition.game_type,
            organizer=competition.organizer,
            created_at=competition.created_at,
            vote_count=competition.vote_count,
            is_active=competition.is_active,
        )
