"""Vote aggregation rules.

Pure functions over snapshots of ideas and of the current voter's votes.
Nothing here performs I/O or mutates its inputs.
"""

from collections.abc import Iterable, Mapping, Sequence

from teamboard.domain.model import Idea, Vote
from teamboard.domain.value import (
    IdeaId,
    IdeaSortKey,
    VoteDecision,
    VoteEligibility,
    VoteKind,
    VoteRejectionReason,
)

VoteIndex = Mapping[IdeaId, Sequence[Vote]]


def index_votes_by_idea(votes: Iterable[Vote]) -> dict[IdeaId, list[Vote]]:
    """Group votes by the idea they were cast on.

    Input order is preserved within each group. No filtering happens here:
    callers pass only the current voter's votes.
    """
    index: dict[IdeaId, list[Vote]] = {}
    for vote in votes:
        index.setdefault(vote.idea_id, []).append(vote)
    return index


def has_voted(index: VoteIndex, idea_id: IdeaId, kind: VoteKind) -> bool:
    """Check whether the indexed votes contain a vote of ``kind`` on an idea."""
    return any(vote.vote_type == kind for vote in index.get(idea_id, ()))


def validate_vote(index: VoteIndex, idea_id: IdeaId, kind: VoteKind) -> VoteDecision:
    """Decide whether a new vote may be cast.

    A voter holds at most one upvote and one downvote per idea, so a second
    vote of the same kind is rejected. The persisted vote count stays the
    authoritative total; only double-voting by the same voter is regulated.
    """
    if has_voted(index, idea_id, kind):
        return VoteDecision.reject(VoteRejectionReason.ALREADY_VOTED)
    return VoteDecision.accept()


def vote_eligibility(index: VoteIndex, idea_id: IdeaId) -> VoteEligibility:
    """Report which kinds of vote are still open to the voter on an idea."""
    return VoteEligibility(
        can_upvote=not has_voted(index, idea_id, VoteKind.UPVOTE),
        can_downvote=not has_voted(index, idea_id, VoteKind.DOWNVOTE),
    )


def vote_delta(kind: VoteKind) -> int:
    """Signed change one vote of ``kind`` makes to the tally."""
    return 1 if kind == VoteKind.UPVOTE else -1


def apply_vote_delta(current_count: int, kind: VoteKind) -> int:
    """Return the vote count after one more vote of ``kind``.

    The tally is a net score and may go below zero.
    """
    return current_count + vote_delta(kind)


def _newest_key(idea: Idea) -> float:
    # Missing timestamps sort as the earliest possible value
    if idea.created_at is None:
        return float("-inf")
    return idea.created_at.timestamp()


def sort_ideas(ideas: Iterable[Idea], key: IdeaSortKey) -> list[Idea]:
    """Order ideas for the voting board.

    ``votes`` sorts by descending vote count, ``newest`` by descending
    creation time. Ties keep their input order.
    """
    if key == IdeaSortKey.VOTES:
        return sorted(ideas, key=lambda idea: idea.votes, reverse=True)
    return sorted(ideas, key=_newest_key, reverse=True)
