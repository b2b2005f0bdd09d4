"""Domain value objects for Team Board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Optional

from teamboard.domain.value.common import ValueObject


class VoteKind(str, Enum):
    """Kind of vote a voter can cast on an idea."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class TaskStatus(str, Enum):
    """Status of an action item.

    Values match what the store persists.
    """

    OPEN = "To Do"
    DONE = "Done"

    def toggled(self) -> "TaskStatus":
        """Return the opposite status."""
        return TaskStatus.DONE if self is TaskStatus.OPEN else TaskStatus.OPEN


class DeadlineBucket(str, Enum):
    """Urgency classification of an open task."""

    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    DUE_TOMORROW = "due_tomorrow"
    NONE = "none"


class IdeaSortKey(str, Enum):
    """Ordering of the idea board."""

    VOTES = "votes"
    NEWEST = "newest"


class VoteRejectionReason(str, Enum):
    """Why a proposed vote was rejected."""

    ALREADY_VOTED = "already_voted"


class VoteDecision(ValueObject):
    """Outcome of validating a proposed vote."""

    accepted: bool
    reason: Optional[VoteRejectionReason] = None

    @classmethod
    def accept(cls) -> "VoteDecision":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: VoteRejectionReason) -> "VoteDecision":
        return cls(accepted=False, reason=reason)


class VoteEligibility(ValueObject):
    """Which vote buttons are still available to a voter on one idea."""

    can_upvote: bool
    can_downvote: bool


class ThemePreference(ValueObject):
    """Dashboard theme preference."""

    dark_mode: bool = False
