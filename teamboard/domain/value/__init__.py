"""Domain value objects for Team Board."""

from teamboard.domain.value.identifiers import (
    IdeaId,
    MeetingId,
    TaskId,
    VoteId,
    VoterId,
)
from teamboard.domain.value.types import (
    DeadlineBucket,
    IdeaSortKey,
    TaskStatus,
    ThemePreference,
    VoteDecision,
    VoteEligibility,
    VoteKind,
    VoteRejectionReason,
)

__all__ = [
    # Identifiers
    "IdeaId",
    "MeetingId",
    "TaskId",
    "VoteId",
    "VoterId",
    # Types
    "DeadlineBucket",
    "IdeaSortKey",
    "TaskStatus",
    "ThemePreference",
    "VoteDecision",
    "VoteEligibility",
    "VoteKind",
    "VoteRejectionReason",
]
