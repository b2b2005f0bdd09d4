"""List ideas use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.policy import sort_ideas, vote_eligibility
from teamboard.domain.service import IdeaService, VoteService
from teamboard.domain.value import IdeaSortKey, VoterId


class IdeaListItem(BaseModel):
    """Idea on the voting board."""

    idea_id: str
    title: str
    description: str
    proposer: str
    votes: int
    created_at: datetime | None
    can_upvote: bool
    can_downvote: bool


class ListIdeasRequest(BaseModel):
    """List ideas request."""

    sort: IdeaSortKey = IdeaSortKey.VOTES
    voter_id: str | None = None  # Current voter (if known)


class ListIdeasResponse(BaseModel):
    """List ideas response."""

    ideas: list[IdeaListItem]
    sort: IdeaSortKey


class ListIdeasUseCase(BaseUseCase):
    """Use case for the idea voting board."""

    def __init__(self, idea_service: IdeaService, vote_service: VoteService) -> None:
        """Initialize list ideas use case.

        Args:
            idea_service: Idea domain service
            vote_service: Vote domain service
        """
        self.idea_service = idea_service
        self.vote_service = vote_service

    async def execute(self, request: ListIdeasRequest) -> ListIdeasResponse:
        """Execute list ideas flow.

        Without a voter every vote button is available; the store still
        rejects duplicates once a voter is named.
        """
        with logfire.span("list_ideas.execute", sort=request.sort.value):
            ideas = sort_ideas(await self.idea_service.list_ideas(), request.sort)

            index = {}
            if request.voter_id and ideas:
                index = await self.vote_service.get_voter_index(
                    VoterId(request.voter_id), [idea.id for idea in ideas]
                )

            items = []
            for idea in ideas:
                eligibility = vote_eligibility(index, idea.id)
                items.append(
                    IdeaListItem(
                        idea_id=idea.id,
                        title=idea.title,
                        description=idea.description,
                        proposer=idea.proposer,
                        votes=idea.votes,
                        created_at=idea.created_at,
                        can_upvote=eligibility.can_upvote,
                        can_downvote=eligibility.can_downvote,
                    )
                )

            logfire.info("Ideas listed", count=len(items))
            return ListIdeasResponse(ideas=items, sort=request.sort)
