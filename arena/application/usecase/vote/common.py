"""Shared vote response models."""

from datetime import datetime

from pydantic import BaseModel

from arena.domain.model import Vote


class VoteItem(BaseModel):
    """Vote as returned to callers."""

    vote_id: int
    competition_id: int
    voter: str
    choice: bool
    rating: int
    comment: str | None
    cast_at: datetime

    @classmethod
    def from_domain(cls, vote: Vote) -> "VoteItem":
        """Build a response item from a domain vote."""
        return cls(
            vote_id=vote.id,
            competition_id=vote.competition_id,
            voter=vote.voter,
            choice=vote.choice,
            rating=vote.rating,
            comment=vote.comment,
            cast_at=vote.cast_at,
        )
