"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from teamboard.domain.model.vote import Vote
from teamboard.domain.value import IdeaId, VoterId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_voter_and_ideas(
        self, voter_id: VoterId, idea_ids: Sequence[IdeaId]
    ) -> List[Vote]:
        """Find a voter's votes on several ideas (batch query).

        Args:
            voter_id: The voter's ID
            idea_ids: Ideas to look at

        Returns:
            The voter's votes on those ideas, oldest first
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already cast this kind of vote
        """
        pass
