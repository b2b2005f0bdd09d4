"""PostgreSQL repository implementations."""

from teamboard.persistence.repository.idea import PostgresIdeaRepository
from teamboard.persistence.repository.meeting import PostgresMeetingRepository
from teamboard.persistence.repository.preference import PostgresPreferenceRepository
from teamboard.persistence.repository.task import PostgresTaskRepository
from teamboard.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresIdeaRepository",
    "PostgresMeetingRepository",
    "PostgresPreferenceRepository",
    "PostgresTaskRepository",
    "PostgresVoteRepository",
]
