"""Idea domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from teamboard.domain.error import NotFoundError, ValidationError
from teamboard.domain.model.idea import Idea
from teamboard.domain.repository import IdeaRepository
from teamboard.domain.value import IdeaId

from .base import Service


class IdeaService(Service):
    """Domain service for idea operations."""

    def __init__(self, idea_repository: IdeaRepository) -> None:
        """Initialize idea service.

        Args:
            idea_repository: Idea repository
        """
        self.idea_repository = idea_repository

    async def submit_idea(self, title: str, description: str, proposer: str) -> Idea:
        """Submit a new idea with zero votes.

        Args:
            title: Idea title
            description: What the idea is about
            proposer: Name of the person proposing it

        Returns:
            Saved idea

        Raises:
            ValidationError: If any field is blank
        """
        with logfire.span("idea_service.submit_idea", proposer=proposer):
            if not title.strip() or not description.strip() or not proposer.strip():
                logfire.warn("Idea submission with blank fields", proposer=proposer)
                raise ValidationError("Please fill in all fields")

            idea = Idea(
                id=IdeaId(str(uuid4())),
                title=title.strip(),
                description=description.strip(),
                proposer=proposer.strip(),
                votes=0,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.idea_repository.save(idea)
            logfire.info("Idea submitted", idea_id=saved.id)
            return saved

    async def get_idea_by_id(self, idea_id: IdeaId) -> Idea | None:
        """Get an idea by ID.

        Args:
            idea_id: Idea ID

        Returns:
            Idea if found, None otherwise
        """
        with logfire.span("idea_service.get_idea_by_id", idea_id=idea_id):
            idea = await self.idea_repository.find_by_id(idea_id)
            if not idea:
                logfire.warn("Idea not found", idea_id=idea_id)
            return idea

    async def list_ideas(self) -> list[Idea]:
        """List all ideas as stored (highest vote count first)."""
        return await self.idea_repository.find_all()

    async def adjust_vote_count(self, idea_id: IdeaId, delta: int) -> Idea:
        """Atomically add delta to an idea's vote count.

        Uses SQL-level arithmetic so concurrent voters never lose an update.

        Args:
            idea_id: Idea ID
            delta: Signed change, not clamped

        Returns:
            Idea as stored after the change

        Raises:
            NotFoundError: If idea not found
        """
        with logfire.span("idea_service.adjust_vote_count", idea_id=idea_id, delta=delta):
            await self.idea_repository.adjust_votes(idea_id, delta)
            idea = await self.idea_repository.find_by_id(idea_id)
            if not idea:
                logfire.error("Idea not found for vote count update", idea_id=idea_id)
                raise NotFoundError("Idea", idea_id)

            logfire.info("Vote count updated", idea_id=idea_id, votes=idea.votes)
            return idea
