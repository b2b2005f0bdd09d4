"""In-memory idea repository for testing."""

from typing import Optional

from teamboard.domain.model.idea import Idea
from teamboard.domain.repository.idea import IdeaRepository
from teamboard.domain.value import IdeaId


class InMemoryIdeaRepository(IdeaRepository):
    """In-memory implementation of IdeaRepository for testing."""

    def __init__(self) -> None:
        self._ideas: dict[IdeaId, Idea] = {}

    async def find_by_id(self, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea by ID."""
        return self._ideas.get(idea_id)

    async def find_all(self) -> list[Idea]:
        """Find all ideas, highest vote count first."""
        return sorted(self._ideas.values(), key=lambda i: i.votes, reverse=True)

    async def save(self, idea: Idea) -> Idea:
        """Save an idea."""
        self._ideas[idea.id] = idea
        return idea

    async def adjust_votes(self, idea_id: IdeaId, delta: int) -> None:
        """Add delta to the vote count."""
        idea = self._ideas.get(idea_id)
        if idea:
            self._ideas[idea_id] = idea.model_copy(update={"votes": idea.votes + delta})
