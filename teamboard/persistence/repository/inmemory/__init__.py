"""In-memory repository implementations for testing."""

from .idea import InMemoryIdeaRepository
from .meeting import InMemoryMeetingRepository
from .preference import InMemoryPreferenceRepository
from .task import InMemoryTaskRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryIdeaRepository",
    "InMemoryMeetingRepository",
    "InMemoryPreferenceRepository",
    "InMemoryTaskRepository",
    "InMemoryVoteRepository",
]
