"""Idea routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel

from teamboard.application.usecase.idea import (
    ListIdeasRequest,
    ListIdeasResponse,
    ListIdeasUseCase,
    SubmitIdeaRequest,
    SubmitIdeaResponse,
    SubmitIdeaUseCase,
)
from teamboard.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from teamboard.domain.error import DomainError
from teamboard.domain.value import IdeaSortKey, VoteKind
from teamboard.interface.error import raise_http_error

router = APIRouter(prefix="/ideas", tags=["ideas"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body."""

    kind: VoteKind


@router.get("", response_model=ListIdeasResponse)
async def list_ideas(
    list_ideas_use_case: FromDishka[ListIdeasUseCase],
    sort: IdeaSortKey = IdeaSortKey.VOTES,
    x_voter_id: str | None = Header(default=None, max_length=255),
) -> ListIdeasResponse:
    """List ideas for the voting board.

    Args:
        list_ideas_use_case: List ideas use case from DI
        sort: "votes" (most votes first) or "newest"
        x_voter_id: Current voter, used to disable vote buttons already used

    Returns:
        Sorted ideas with per-voter vote availability
    """
    return await list_ideas_use_case.execute(
        ListIdeasRequest(sort=sort, voter_id=x_voter_id)
    )


@router.post("", response_model=SubmitIdeaResponse, status_code=status.HTTP_201_CREATED)
async def submit_idea(
    request: SubmitIdeaRequest,
    submit_idea_use_case: FromDishka[SubmitIdeaUseCase],
) -> SubmitIdeaResponse:
    """Submit a new content idea.

    Raises:
        HTTPException: If a field is blank
    """
    try:
        return await submit_idea_use_case.execute(request)
    except DomainError as e:
        raise_http_error(e)


@router.post("/{idea_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    idea_id: UUID,
    body: VoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    x_voter_id: str | None = Header(default=None, max_length=255),
) -> CastVoteResponse:
    """Upvote or downvote an idea.

    Requires a voter identity.

    Args:
        idea_id: Idea ID
        body: Vote kind
        cast_vote_use_case: Cast vote use case from DI
        x_voter_id: Voter identity supplied by the caller

    Raises:
        HTTPException: If no voter, idea not found, or already voted
    """
    if not x_voter_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Voter identity required to vote",
        )

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(idea_id=str(idea_id), voter_id=x_voter_id, kind=body.kind)
        )
    except DomainError as e:
        raise_http_error(e)
