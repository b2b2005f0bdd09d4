"""Unit tests for CastVoteUseCase."""

import pytest

from teamboard.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from teamboard.domain.error import AlreadyVotedError
from teamboard.domain.repository import IdeaRepository
from teamboard.domain.value import VoteKind
from tests.conftest import make_idea
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_message_and_count(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=2))

        # Act
        response = await use_case.execute(
            CastVoteRequest(idea_id=idea.id, voter_id="voter-1", kind=VoteKind.UPVOTE)
        )

        # Assert
        assert response.votes == 3
        assert response.message == "Upvote added!"

    @pytest.mark.asyncio
    async def test_downvote_message(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=2))

        response = await use_case.execute(
            CastVoteRequest(idea_id=idea.id, voter_id="voter-1", kind="downvote")
        )

        assert response.kind == VoteKind.DOWNVOTE
        assert response.votes == 1
        assert response.message == "Downvote added!"

    @pytest.mark.asyncio
    async def test_repeat_downvote_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        idea_repo = await unit_env.get(IdeaRepository)
        idea = await idea_repo.save(make_idea(votes=0))
        request = CastVoteRequest(idea_id=idea.id, voter_id="voter-1", kind=VoteKind.DOWNVOTE)
        await use_case.execute(request)

        with pytest.raises(AlreadyVotedError, match="You have already downvoted this idea"):
            await use_case.execute(request)
