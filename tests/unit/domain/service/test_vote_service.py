"""Unit tests for VoteService."""

from typing import Sequence

import pytest

from teamboard.domain.error import AlreadyVotedError, NotFoundError
from teamboard.domain.model.vote import Vote
from teamboard.domain.repository import IdeaRepository, VoteRepository
from teamboard.domain.service import IdeaService, VoteService
from teamboard.domain.value import IdeaId, VoteKind, VoterId
from teamboard.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import make_idea
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class BlindVoteRepository(InMemoryVoteRepository):
    """Vote repository whose reads miss votes, as when two requests race."""

    async def find_by_voter_and_ideas(
        self, voter_id: VoterId, idea_ids: Sequence[IdeaId]
    ) -> list[Vote]:
        return []


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_upvote_records_vote_and_increments_count(self, unit_env):
        """Upvoting should store the vote and add one to the count."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=10))

        # Act
        result = await vote_service.cast_vote(idea.id, VoterId("voter-1"), VoteKind.UPVOTE)

        # Assert
        assert result.votes == 11
        votes = await vote_repo.find_by_voter_and_ideas(VoterId("voter-1"), [idea.id])
        assert len(votes) == 1
        assert votes[0].vote_type == VoteKind.UPVOTE
        assert votes[0].created_at.tzinfo is not None
        stored = await idea_repo.find_by_id(idea.id)
        assert stored.votes == 11

    @pytest.mark.asyncio
    async def test_upvote_and_downvote_both_allowed(self, unit_env):
        """A voter may hold one upvote and one downvote on the same idea."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=0))
        voter = VoterId("voter-1")

        # Act
        await vote_service.cast_vote(idea.id, voter, VoteKind.UPVOTE)
        result = await vote_service.cast_vote(idea.id, voter, VoteKind.DOWNVOTE)

        # Assert
        assert result.votes == 0

    @pytest.mark.asyncio
    async def test_second_upvote_rejected_and_count_unchanged(self, unit_env):
        """Repeating a vote should fail without touching the count."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=0))
        voter = VoterId("voter-1")
        await vote_service.cast_vote(idea.id, voter, VoteKind.UPVOTE)

        # Act & Assert
        with pytest.raises(AlreadyVotedError, match="You have already upvoted this idea"):
            await vote_service.cast_vote(idea.id, voter, VoteKind.UPVOTE)

        stored = await idea_repo.find_by_id(idea.id)
        assert stored.votes == 1

    @pytest.mark.asyncio
    async def test_different_voters_each_count(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=0))

        await vote_service.cast_vote(idea.id, VoterId("a"), VoteKind.UPVOTE)
        result = await vote_service.cast_vote(idea.id, VoterId("b"), VoteKind.UPVOTE)

        assert result.votes == 2

    @pytest.mark.asyncio
    async def test_downvote_can_take_count_below_zero(self, unit_env):
        """Net score is not clamped."""
        vote_service = await unit_env.get(VoteService)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=0))

        result = await vote_service.cast_vote(idea.id, VoterId("a"), VoteKind.DOWNVOTE)

        assert result.votes == -1

    @pytest.mark.asyncio
    async def test_vote_on_missing_idea_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Idea not found"):
            await vote_service.cast_vote(IdeaId("missing"), VoterId("a"), VoteKind.UPVOTE)

    @pytest.mark.asyncio
    async def test_duplicate_caught_by_store_maps_to_already_voted(self, unit_env):
        """A unique-constraint failure on save should surface as AlreadyVotedError."""
        # Arrange
        idea_service = await unit_env.get(IdeaService)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=3))
        vote_service = VoteService(
            vote_repository=BlindVoteRepository(), idea_service=idea_service
        )
        voter = VoterId("voter-1")
        await vote_service.cast_vote(idea.id, voter, VoteKind.UPVOTE)

        # Act & Assert
        with pytest.raises(AlreadyVotedError):
            await vote_service.cast_vote(idea.id, voter, VoteKind.UPVOTE)

        stored = await idea_repo.find_by_id(idea.id)
        assert stored.votes == 4


class TestGetVoterIndex:
    """Tests for get_voter_index method."""

    @pytest.mark.asyncio
    async def test_empty_idea_list_returns_empty_index(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_voter_index(VoterId("a"), []) == {}

    @pytest.mark.asyncio
    async def test_only_requested_voter_is_indexed(self, unit_env):
        """Other voters' votes should not appear in the index."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea())
        await vote_service.cast_vote(idea.id, VoterId("a"), VoteKind.UPVOTE)
        await vote_service.cast_vote(idea.id, VoterId("b"), VoteKind.DOWNVOTE)

        # Act
        index = await vote_service.get_voter_index(VoterId("a"), [idea.id])

        # Assert
        assert [v.vote_type for v in index[idea.id]] == [VoteKind.UPVOTE]
