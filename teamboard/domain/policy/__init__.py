"""Pure business rules for voting and deadlines."""

from .deadline import (
    classify,
    completion_rate,
    count_by_bucket,
    meeting_bucket,
    upcoming_meetings,
    urgent_list,
)
from .voting import (
    apply_vote_delta,
    has_voted,
    index_votes_by_idea,
    sort_ideas,
    validate_vote,
    vote_delta,
    vote_eligibility,
)

__all__ = [
    "apply_vote_delta",
    "classify",
    "completion_rate",
    "count_by_bucket",
    "has_voted",
    "index_votes_by_idea",
    "meeting_bucket",
    "sort_ideas",
    "upcoming_meetings",
    "urgent_list",
    "validate_vote",
    "vote_delta",
    "vote_eligibility",
]
