"""Repository interfaces for Team Board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from teamboard.domain.repository.idea import IdeaRepository
from teamboard.domain.repository.meeting import MeetingRepository
from teamboard.domain.repository.preference import PreferenceRepository
from teamboard.domain.repository.task import TaskRepository
from teamboard.domain.repository.vote import VoteRepository

__all__ = [
    "IdeaRepository",
    "MeetingRepository",
    "PreferenceRepository",
    "TaskRepository",
    "VoteRepository",
]
