"""In-memory vote repository for testing."""

from typing import Sequence

from sqlalchemy.exc import IntegrityError

from teamboard.domain.model.vote import Vote
from teamboard.domain.repository.vote import VoteRepository
from teamboard.domain.value import IdeaId, VoterId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_voter_and_ideas(
        self, voter_id: VoterId, idea_ids: Sequence[IdeaId]
    ) -> list[Vote]:
        """Find a voter's votes on several ideas (batch query)."""
        if not idea_ids:
            return []

        wanted = set(idea_ids)
        return [v for v in self._votes if v.voter_id == voter_id and v.idea_id in wanted]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the voter already cast this kind of vote
        """
        for existing in self._votes:
            if (
                existing.idea_id == vote.idea_id
                and existing.voter_id == vote.voter_id
                and existing.vote_type == vote.vote_type
            ):
                raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote
