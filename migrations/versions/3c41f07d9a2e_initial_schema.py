"""initial_schema

Create the competition registry schema:
- Competitions (organizer-owned, active/inactive lifecycle, vote counter)
- Votes (one per voter per competition, rating 1-5, optional comment)

Revision ID: 3c41f07d9a2e
Revises:
Create Date: 2026-10-19 10:12:44.318802

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41f07d9a2e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Id sequences start at 1 and are never reset
    op.execute(sa.schema.CreateSequence(sa.Sequence("competition_id_seq", start=1)))
    op.execute(sa.schema.CreateSequence(sa.Sequence("vote_id_seq", start=1)))

    # ========================================================================
    # COMPETITIONS table
    # ========================================================================
    op.create_table(
        "competitions",
        sa.Column(
            "id",
            sa.BigInteger(),
            server_default=sa.text("nextval('competition_id_seq')"),
            nullable=False,
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("game_type", sa.Text(), nullable=False),
        sa.Column("organizer", sa.String(length=255), nullable=False),
        sa.Column("vote_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default="true", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute("ALTER SEQUENCE competition_id_seq OWNED BY competitions.id")
    op.create_index("idx_competitions_organizer", "competitions", ["organizer"])
    op.create_index("idx_competitions_is_active", "competitions", ["is_active"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.BigInteger(),
            server_default=sa.text("nextval('vote_id_seq')"),
            nullable=False,
        ),
        sa.Column("competition_id", sa.BigInteger(), nullable=False),
        sa.Column("voter", sa.String(length=255), nullable=False),
        sa.Column("choice", sa.Boolean(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column(
            "cast_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
        sa.ForeignKeyConstraint(
            ["competition_id"], ["competitions.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        # Has-voted index: one vote per voter per competition
        sa.UniqueConstraint("competition_id", "voter", name="unique_vote"),
    )
    op.execute("ALTER SEQUENCE vote_id_seq OWNED BY votes.id")
    op.create_index("idx_votes_voter", "votes", ["voter"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_voter", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_competitions_is_active", table_name="competitions")
    op.drop_index("idx_competitions_organizer", table_name="competitions")
    op.drop_table("competitions")
    op.execute("DROP SEQUENCE IF EXISTS vote_id_seq")
    op.execute("DROP SEQUENCE IF EXISTS competition_id_seq")
