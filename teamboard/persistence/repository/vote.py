"""PostgreSQL implementation of Vote repository."""

from typing import List, Sequence

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from teamboard.domain.model import Vote
from teamboard.domain.repository import VoteRepository
from teamboard.domain.value import IdeaId, VoterId
from teamboard.persistence.mappers import row_to_vote, vote_to_dict
from teamboard.persistence.tables import idea_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_voter_and_ideas(
        self, voter_id: VoterId, idea_ids: Sequence[IdeaId]
    ) -> List[Vote]:
        """Find a voter's votes on several ideas (batch query)."""
        if not idea_ids:
            return []

        stmt = (
            select(idea_votes_table)
            .where(
                and_(
                    idea_votes_table.c.voter_id == voter_id,
                    idea_votes_table.c.idea_id.in_(idea_ids),
                )
            )
            .order_by(idea_votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The unique_idea_vote constraint raises IntegrityError on duplicates.
        """
        stmt = insert(idea_votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote
