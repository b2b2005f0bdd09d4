"""Strongly typed identifiers for Team Board domain entities.

Identifiers are opaque strings as handed out by the store (UUID text for
rows created by the database, caller-chosen text for voters).
"""

from typing import NewType

IdeaId = NewType("IdeaId", str)
VoteId = NewType("VoteId", str)
VoterId = NewType("VoterId", str)
TaskId = NewType("TaskId", str)
MeetingId = NewType("MeetingId", str)
