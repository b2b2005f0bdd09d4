"""SQLAlchemy table definitions for Team Board.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# IDEAS TABLE
# ============================================================================
ideas_table = Table(
    "ideas",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default="gen_random_uuid()",
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("proposer", String(255), nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),  # Net, unclamped
    Column("created_at", TIMESTAMP(timezone=True), nullable=True, server_default="NOW()"),
)

# ============================================================================
# IDEA VOTES TABLE
# ============================================================================
idea_votes_table = Table(
    "idea_votes",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default="gen_random_uuid()",
    ),
    Column(
        "idea_id",
        UUID(as_uuid=False),
        ForeignKey("ideas.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", String(255), nullable=False),  # Opaque, caller supplied
    Column(
        "vote_type",
        Enum("upvote", "downvote", name="idea_vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("idea_id", "voter_id", "vote_type", name="unique_idea_vote"),
)

Index("idx_idea_votes_voter_id", idea_votes_table.c.voter_id)

# ============================================================================
# MEETINGS TABLE
# ============================================================================
meetings_table = Table(
    "meetings",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default="gen_random_uuid()",
    ),
    Column("title", String(300), nullable=False),
    Column("date", Date, nullable=False),
    Column("time", String(20), nullable=False),
    Column("agenda_items", ARRAY(Text), nullable=False, server_default="{}"),
    Column("is_archived", Boolean, nullable=False, server_default="false"),
)

Index("idx_meetings_date", meetings_table.c.date)

# ============================================================================
# ACTION ITEMS TABLE
# ============================================================================
action_items_table = Table(
    "action_items",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default="gen_random_uuid()",
    ),
    Column("description", Text, nullable=False),
    Column("assignee", String(255), nullable=False),
    Column("due_date", Date, nullable=False),
    Column(
        "status",
        Enum("To Do", "Done", name="action_item_status", create_type=False),
        nullable=False,
        server_default="To Do",
    ),
    Column(
        "meeting_id",
        UUID(as_uuid=False),
        ForeignKey("meetings.id", ondelete="SET NULL"),
        nullable=True,
    ),
)

Index("idx_action_items_due_date", action_items_table.c.due_date)

# ============================================================================
# PREFERENCES TABLE (key-value)
# ============================================================================
preferences_table = Table(
    "preferences",
    metadata,
    Column("owner_id", String(255), primary_key=True),
    Column("key", String(100), primary_key=True),
    Column("value", Text, nullable=False),
)
