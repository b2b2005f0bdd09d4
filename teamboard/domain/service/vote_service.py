"""Vote domain service."""

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from teamboard.domain.error import AlreadyVotedError, NotFoundError
from teamboard.domain.model.idea import Idea
from teamboard.domain.model.vote import Vote
from teamboard.domain.policy import index_votes_by_idea, validate_vote, vote_delta
from teamboard.domain.repository import VoteRepository
from teamboard.domain.value import IdeaId, VoteId, VoteKind, VoterId

from .base import Service
from .idea_service import IdeaService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository, idea_service: IdeaService) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            idea_service: Idea domain service
        """
        self.vote_repository = vote_repository
        self.idea_service = idea_service

    async def get_voter_index(
        self, voter_id: VoterId, idea_ids: Sequence[IdeaId]
    ) -> dict[IdeaId, list[Vote]]:
        """Fetch a voter's votes on the given ideas, grouped by idea.

        Args:
            voter_id: Voter ID
            idea_ids: Ideas of interest

        Returns:
            Mapping of idea ID to the voter's votes on it
        """
        if not idea_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_ideas(voter_id, idea_ids)
        return index_votes_by_idea(votes)

    async def cast_vote(self, idea_id: IdeaId, voter_id: VoterId, kind: VoteKind) -> Idea:
        """Cast an upvote or downvote on an idea.

        The vote is checked against the voter's existing votes before anything
        is written, then recorded, then the idea's count is adjusted.

        Args:
            idea_id: Idea ID
            voter_id: Voter ID
            kind: Upvote or downvote

        Returns:
            The idea with its updated vote count

        Raises:
            NotFoundError: If the idea does not exist
            AlreadyVotedError: If the voter already cast this kind of vote
        """
        with logfire.span(
            "cast_vote", idea_id=idea_id, voter_id=voter_id, kind=kind.value
        ):
            idea = await self.idea_service.get_idea_by_id(idea_id)
            if not idea:
                logfire.warn("Vote on non-existent idea", idea_id=idea_id)
                raise NotFoundError("Idea", idea_id)

            index = await self.get_voter_index(voter_id, [idea_id])
            decision = validate_vote(index, idea_id, kind)
            if not decision.accepted:
                logfire.warn(
                    "Duplicate vote rejected",
                    idea_id=idea_id,
                    voter_id=voter_id,
                    kind=kind.value,
                )
                raise AlreadyVotedError(idea_id, voter_id, kind.value)

            vote = Vote(
                id=VoteId(str(uuid4())),
                idea_id=idea_id,
                voter_id=voter_id,
                vote_type=kind,
                created_at=datetime.now(timezone.utc),
            )

            try:
                await self.vote_repository.save(vote)
            except IntegrityError:
                # Another request from the same voter got there first
                logfire.warn(
                    "Duplicate vote attempt", idea_id=idea_id, voter_id=voter_id
                )
                raise AlreadyVotedError(idea_id, voter_id, kind.value)

            return await self.idea_service.adjust_vote_count(idea_id, vote_delta(kind))
