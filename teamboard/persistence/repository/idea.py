"""PostgreSQL implementation of Idea repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamboard.domain.model import Idea
from teamboard.domain.repository import IdeaRepository
from teamboard.domain.value import IdeaId
from teamboard.persistence.mappers import idea_to_dict, row_to_idea
from teamboard.persistence.tables import ideas_table


class PostgresIdeaRepository(IdeaRepository):
    """PostgreSQL implementation of IdeaRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea by ID."""
        stmt = select(ideas_table).where(ideas_table.c.id == idea_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_idea(row._asdict()) if row else None

    async def find_all(self) -> List[Idea]:
        """Find all ideas, highest vote count first."""
        stmt = select(ideas_table).order_by(ideas_table.c.votes.desc())
        result = await self.session.execute(stmt)
        return [row_to_idea(row._asdict()) for row in result.fetchall()]

    async def save(self, idea: Idea) -> Idea:
        """Save an idea (create or update)."""
        with logfire.span("idea_repository.save", idea_id=idea.id):
            existing = await self.find_by_id(idea.id)
            idea_dict = idea_to_dict(idea)

            if existing:
                stmt = (
                    ideas_table.update()
                    .where(ideas_table.c.id == idea.id)
                    .values(**idea_dict)
                )
            else:
                stmt = ideas_table.insert().values(**idea_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return idea

    async def adjust_votes(self, idea_id: IdeaId, delta: int) -> None:
        """Atomically add delta to the vote count."""
        stmt = (
            ideas_table.update()
            .where(ideas_table.c.id == idea_id)
            .values(votes=ideas_table.c.votes + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()
