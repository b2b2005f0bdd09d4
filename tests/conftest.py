"""Test configuration and fixtures."""

from datetime import date, datetime
from uuid import uuid4

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


def make_idea(
    title: str = "Test Idea",
    votes: int = 0,
    created_at: datetime | None = None,
    idea_id: str | None = None,
) -> Idea:
    """Helper to build an idea with sensible defaults."""
    return Idea(
        id=IdeaId(idea_id or str(uuid4())),
        title=title,
        description="Test description",
        proposer="Ana",
        votes=votes,
        created_at=created_at,
    )


def make_vote(idea_id: str, voter_id: str, kind: VoteKind) -> Vote:
    """Helper to build a vote."""
    return Vote(
        id=VoteId(str(uuid4())),
        idea_id=IdeaId(idea_id),
        voter_id=VoterId(voter_id),
        vote_type=kind,
    )


def make_task(
    due_date: date | str | None,
    status: TaskStatus = TaskStatus.OPEN,
    description: str = "Write the newsletter",
    meeting_id: str | None = None,
) -> Task:
    """Helper to build an action item. ``due_date`` may be raw store text."""
    return Task(
        id=TaskId(str(uuid4())),
        description=description,
        assignee="Ben",
        due_date=due_date,
        status=status,
        meeting_id=MeetingId(meeting_id) if meeting_id else None,
    )


def make_meeting(
    meeting_date: date | str | None,
    title: str = "Weekly sync",
    is_archived: bool = False,
) -> Meeting:
    """Helper to build a meeting."""
    return Meeting(
        id=MeetingId(str(uuid4())),
        title=title,
        date=meeting_date,
        time="10:00",
        agenda_items=[],
        is_archived=is_archived,
    )
