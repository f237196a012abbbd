"""SQLAlchemy table definitions for the competition registry.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Sequence,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# Id sequences (start at 1, never reused)
competition_id_seq = Sequence("competition_id_seq", start=1, metadata=metadata)
vote_id_seq = Sequence("vote_id_seq", start=1, metadata=metadata)

# Ids live in BIGINT columns; anything outside this range was never stored
MAX_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    """Check whether an ID fits the id columns."""
    return 1 <= value <= MAX_ID


# ============================================================================
# COMPETITIONS TABLE
# ============================================================================
competitions_table = Table(
    "competitions",
    metadata,
    Column("id", BigInteger, competition_id_seq, primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("game_type", Text, nullable=False),
    Column("organizer", String(255), nullable=False),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
)

Index("idx_competitions_organizer", competitions_table.c.organizer)
Index("idx_competitions_is_active", competitions_table.c.is_active)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", BigInteger, vote_id_seq, primary_key=True),
    Column(
        "competition_id",
        BigInteger,
        ForeignKey("competitions.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("voter", String(255), nullable=False),
    Column("choice", Boolean, nullable=False),
    Column("rating", Integer, nullable=False),
    Column("comment", Text, nullable=True),
    Column("cast_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    # Has-voted index: one vote per voter per competition
    UniqueConstraint("competition_id", "voter", name="unique_vote"),
)

Index("idx_votes_voter", votes_table.c.voter)
