"""Submit idea use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.service import IdeaService


class SubmitIdeaRequest(BaseModel):
    """Submit idea request."""

    title: str = Field(max_length=300)
    description: str
    proposer: str = Field(max_length=255)


class SubmitIdeaResponse(BaseModel):
    """Submit idea response."""

    idea_id: str
    title: str
    votes: int
    created_at: datetime | None


class SubmitIdeaUseCase(BaseUseCase):
    """Use case for proposing a new content idea."""

    def __init__(self, idea_service: IdeaService) -> None:
        """Initialize submit idea use case.

        Args:
            idea_service: Idea domain service
        """
        self.idea_service = idea_service

    async def execute(self, request: SubmitIdeaRequest) -> SubmitIdeaResponse:
        """Execute submit idea flow.

        Raises:
            ValidationError: If a field is blank
        """
        idea = await self.idea_service.submit_idea(
            title=request.title,
            description=request.description,
            proposer=request.proposer,
        )
        return SubmitIdeaResponse(
            idea_id=idea.id,
            title=idea.title,
            votes=idea.votes,
            created_at=idea.created_at,
        )
