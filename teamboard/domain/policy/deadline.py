"""Deadline classification rules.

Every function takes the current instant explicitly and compares whole
calendar days, never instants.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta
from typing import Optional

from teamboard.domain.model import Meeting, Task
from teamboard.domain.value import DeadlineBucket
from teamboard.domain.value.dates import parse_calendar_date, parse_timestamp

URGENT_BUCKETS = frozenset({DeadlineBucket.DUE_TODAY, DeadlineBucket.DUE_TOMORROW})


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")


def _bucket_for(day: Optional[date], now: datetime) -> DeadlineBucket:
    if day is None:
        return DeadlineBucket.NONE
    today = now.date()
    if day < today:
        return DeadlineBucket.OVERDUE
    if day == today:
        return DeadlineBucket.DUE_TODAY
    if day == today + timedelta(days=1):
        return DeadlineBucket.DUE_TOMORROW
    return DeadlineBucket.NONE


def classify(task: Task, now: datetime) -> DeadlineBucket:
    """Classify a task by how urgent its due date is.

    Done tasks and tasks without a usable due date are never urgent.
    """
    if task.is_done:
        return DeadlineBucket.NONE
    return _bucket_for(task.due_date, now)


def urgent_list(
    tasks: Iterable[Task], now: datetime, limit: int = 5
) -> list[Task]:
    """Open tasks due today or tomorrow, earliest first, at most ``limit``."""
    _check_limit(limit)
    urgent = [task for task in tasks if classify(task, now) in URGENT_BUCKETS]
    # Urgent tasks always carry a due date
    urgent.sort(key=lambda task: task.due_date)
    return urgent[:limit]


def count_by_bucket(tasks: Iterable[Task], now: datetime) -> dict[DeadlineBucket, int]:
    """Count tasks per bucket. Every bucket is present, zero counts included."""
    counts = {bucket: 0 for bucket in DeadlineBucket}
    for task in tasks:
        counts[classify(task, now)] += 1
    return counts


def completion_rate(tasks: Sequence[Task]) -> float:
    """Percentage of done tasks, 0 when there are no tasks."""
    total = len(tasks)
    if total == 0:
        return 0.0
    done = sum(1 for task in tasks if task.is_done)
    return 100 * done / total


def meeting_bucket(meeting: Meeting, now: datetime) -> DeadlineBucket:
    """Badge for a meeting: today, tomorrow or nothing.

    Meetings are never reported as overdue.
    """
    bucket = _bucket_for(meeting.date, now)
    if bucket == DeadlineBucket.OVERDUE:
        return DeadlineBucket.NONE
    return bucket


def upcoming_meetings(
    meetings: Iterable[Meeting], now: datetime, limit: int = 3
) -> list[Meeting]:
    """Active meetings dated today or later, in input order, at most ``limit``."""
    _check_limit(limit)
    today = now.date()
    upcoming = [
        meeting
        for meeting in meetings
        if not meeting.is_archived
        and meeting.date is not None
        and meeting.date >= today
    ]
    return upcoming[:limit]


__all__ = [
    "URGENT_BUCKETS",
    "classify",
    "completion_rate",
    "count_by_bucket",
    "meeting_bucket",
    "parse_calendar_date",
    "parse_timestamp",
    "upcoming_meetings",
    "urgent_list",
]
