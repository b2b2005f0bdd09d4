"""Domain model entities for Team Board."""

from teamboard.domain.model.idea import Idea
from teamboard.domain.model.meeting import Meeting
from teamboard.domain.model.task import Task
from teamboard.domain.model.vote import Vote

__all__ = [
    "Idea",
    "Meeting",
    "Task",
    "Vote",
]
