"""Idea repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from teamboard.domain.model.idea import Idea
from teamboard.domain.value import IdeaId


class IdeaRepository(ABC):
    """Repository for Idea entity.

    Defines the contract for idea persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea by ID.

        Args:
            idea_id: The idea's unique identifier

        Returns:
            The idea if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Idea]:
        """Find all ideas, highest vote count first."""
        pass

    @abstractmethod
    async def adjust_votes(self, idea_id: IdeaId, delta: int) -> None:
        """Atomically add delta to the vote count.

        Uses SQL-level arithmetic to avoid lost updates between voters.

        Args:
            idea_id: The idea ID
            delta: Signed change, not clamped
        """
        pass

    @abstractmethod
    async def save(self, idea: Idea) -> Idea:
        """Save an idea (create or update).

        Args:
            idea: The idea to save

        Returns:
            The saved idea
        """
        pass
