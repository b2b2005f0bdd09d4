"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from teamboard.domain.model import Idea, Meeting, Task, Vote
from teamboard.domain.value import (
    IdeaId,
    MeetingId,
    TaskId,
    TaskStatus,
    VoteId,
    VoteKind,
    VoterId,
)


def row_to_idea(row: Dict[str, Any]) -> Idea:
    """Convert database row to Idea domain model."""
    return Idea(
        id=IdeaId(str(row["id"])),
        title=row["title"],
        description=row["description"],
        proposer=row["proposer"],
        votes=row["votes"],
        created_at=row.get("created_at"),
    )


def idea_to_dict(idea: Idea) -> Dict[str, Any]:
    """Convert Idea domain model to database dict."""
    return idea.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(str(row["id"])),
        idea_id=IdeaId(str(row["idea_id"])),
        voter_id=VoterId(row["voter_id"]),
        vote_type=VoteKind(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_task(row: Dict[str, Any]) -> Task:
    """Convert database row to Task domain model.

    An unreadable due date ends up as None (see Task).
    """
    meeting_id = row.get("meeting_id")
    return Task(
        id=TaskId(str(row["id"])),
        description=row["description"],
        assignee=row["assignee"],
        due_date=row.get("due_date"),
        status=TaskStatus(row["status"]),
        meeting_id=MeetingId(str(meeting_id)) if meeting_id else None,
    )


def task_to_dict(task: Task) -> Dict[str, Any]:
    """Convert Task domain model to database dict."""
    data = task.model_dump()
    data["status"] = task.status.value
    return data


def row_to_meeting(row: Dict[str, Any]) -> Meeting:
    """Convert database row to Meeting domain model."""
    return Meeting(
        id=MeetingId(str(row["id"])),
        title=row["title"],
        date=row.get("date"),
        time=row["time"],
        agenda_items=list(row.get("agenda_items") or []),
        is_archived=row["is_archived"],
    )


def meeting_to_dict(meeting: Meeting) -> Dict[str, Any]:
    """Convert Meeting domain model to database dict."""
    return meeting.model_dump()
