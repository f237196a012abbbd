"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from arena.domain.model import Competition, Vote
from arena.domain.value import CompetitionId, UserId, VoteId


def row_to_competition(row: Dict[str, Any]) -> Competition:
    """Convert database row to Competition domain model.

    Args:
        row: Database row as dict

    Returns:
        Competition domain model
    """
    return Competition(
        id=CompetitionId(row["id"]),
        title=row["title"],
        description=row["description"],
        game_type=row["game_type"],
        organizer=UserId(row["organizer"]),
        created_at=row["created_at"],
        vote_count=row["vote_count"],
        is_active=row["is_active"],
    )


def competition_to_dict(competition: Competition) -> Dict[str, Any]:
    """Convert Competition domain model to database dict.

    Args:
        competition: Competition domain model

    Returns:
        Dict suitable for database insertion
    """
    return competition.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        competition_id=CompetitionId(row["competition_id"]),
        voter=UserId(row["voter"]),
        choice=row["choice"],
        rating=row["rating"],
        comment=row.get("comment"),
        cast_at=row["cast_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return vote.model_dump()
