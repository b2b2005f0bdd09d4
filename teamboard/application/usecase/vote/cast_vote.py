"""Cast vote use case."""

from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.service import VoteService
from teamboard.domain.value import IdeaId, VoteKind, VoterId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    idea_id: str
    voter_id: str  # Supplied by the caller, never generated here
    kind: VoteKind


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    idea_id: str
    kind: VoteKind
    votes: int
    message: str


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting or downvoting an idea."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the idea does not exist
            AlreadyVotedError: If the voter already cast this kind of vote
        """
        idea = await self.vote_service.cast_vote(
            IdeaId(request.idea_id), VoterId(request.voter_id), request.kind
        )
        label = "Upvote" if request.kind == VoteKind.UPVOTE else "Downvote"
        return CastVoteResponse(
            idea_id=idea.id,
            kind=request.kind,
            votes=idea.votes,
            message=f"{label} added!",
        )
