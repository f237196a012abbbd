"""Vote entity.

Votes link one voter to one competition with a support/oppose choice and
a 1-5 rating. They are immutable once cast.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from arena.domain.model.common import DomainModel
from arena.domain.value import MAX_RATING, MIN_RATING, CompetitionId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per competition (unique competition/voter key)
    - Never cast by the competition's organizer
    - No update or delete once stored
    """

    id: VoteId = Field(ge=1)
    competition_id: CompetitionId
    voter: UserId
    choice: bool
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)
    comment: Optional[str] = None
    cast_at: datetime = Field(default_factory=datetime.now)
