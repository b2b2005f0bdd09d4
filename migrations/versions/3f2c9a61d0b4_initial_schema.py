"""initial_schema

Create the schema for the team board:
- Ideas (net vote counter, unclamped)
- Idea votes (one upvote and one downvote per voter per idea)
- Meetings (agenda stored as a text array)
- Action items (optionally linked to a meeting)
- Preferences (per-owner key-value settings)

Revision ID: 3f2c9a61d0b4
Revises:
Create Date: 2026-10-16 09:12:44.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a61d0b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE idea_vote_type AS ENUM ('upvote', 'downvote');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE action_item_status AS ENUM ('To Do', 'Done');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # IDEAS table
    # ========================================================================
    op.create_table(
        "ideas",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("proposer", sa.String(length=255), nullable=False),
        sa.Column("votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_ideas_votes", "ideas", [sa.text("votes DESC")])

    # ========================================================================
    # IDEA VOTES table
    # ========================================================================
    op.create_table(
        "idea_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("idea_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.String(length=255), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM(
                "upvote", "downvote", name="idea_vote_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["idea_id"], ["ideas.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "idea_id", "voter_id", "vote_type", name="unique_idea_vote"
        ),
    )
    op.create_index("idx_idea_votes_voter_id", "idea_votes", ["voter_id"])

    # ========================================================================
    # MEETINGS table
    # ========================================================================
    op.create_table(
        "meetings",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=20), nullable=False),
        sa.Column(
            "agenda_items",
            postgresql.ARRAY(sa.Text()),
            server_default="{}",
            nullable=False,
        ),
        sa.Column("is_archived", sa.Boolean(), server_default="false", nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_meetings_date", "meetings", ["date"])

    # ========================================================================
    # ACTION ITEMS table
    # ========================================================================
    op.create_table(
        "action_items",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("assignee", sa.String(length=255), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM("To Do", "Done", name="action_item_status", create_type=False),
            server_default="To Do",
            nullable=False,
        ),
        sa.Column("meeting_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["meeting_id"], ["meetings.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_action_items_due_date", "action_items", ["due_date"])

    # ========================================================================
    # PREFERENCES table
    # ========================================================================
    op.create_table(
        "preferences",
        sa.Column("owner_id", sa.String(length=255), nullable=False),
        sa.Column("key", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("owner_id", "key"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("preferences")
    op.drop_index("idx_action_items_due_date", table_name="action_items")
    op.drop_table("action_items")
    op.drop_index("idx_meetings_date", table_name="meetings")
    op.drop_table("meetings")
    op.drop_index("idx_idea_votes_voter_id", table_name="idea_votes")
    op.drop_table("idea_votes")
    op.drop_index("idx_ideas_votes", table_name="ideas")
    op.drop_table("ideas")

    op.execute("DROP TYPE IF EXISTS action_item_status")
    op.execute("DROP TYPE IF EXISTS idea_vote_type")
