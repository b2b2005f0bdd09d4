"""Domain layer DI providers."""

from dishka import Scope, provide

from teamboard.domain.repository import (
    IdeaRepository,
    MeetingRepository,
    PreferenceRepository,
    TaskRepository,
    VoteRepository,
)
from teamboard.domain.service import (
    IdeaService,
    MeetingService,
    PreferenceService,
    TaskService,
    VoteService,
)
from teamboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_idea_service(self, idea_repository: IdeaRepository) -> IdeaService:
        """Provide idea domain service."""
        return IdeaService(idea_repository=idea_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, idea_service: IdeaService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, idea_service=idea_service)

    @provide
    def get_task_service(self, task_repository: TaskRepository) -> TaskService:
        """Provide task domain service."""
        return TaskService(task_repository=task_repository)

    @provide
    def get_meeting_service(
        self, meeting_repository: MeetingRepository
    ) -> MeetingService:
        """Provide meeting domain service."""
        return MeetingService(meeting_repository=meeting_repository)

    @provide
    def get_preference_service(
        self, preference_repository: PreferenceRepository
    ) -> PreferenceService:
        """Provide preference domain service."""
        return PreferenceService(preference_repository=preference_repository)
