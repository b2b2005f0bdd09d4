"""Mock persistence providers for testing."""

from dishka import Scope, provide

from teamboard.domain.repository import (
    IdeaRepository,
    MeetingRepository,
    PreferenceRepository,
    TaskRepository,
    VoteRepository,
)
from teamboard.persistence.repository.inmemory import (
    InMemoryIdeaRepository,
    InMemoryMeetingRepository,
    InMemoryPreferenceRepository,
    InMemoryTaskRepository,
    InMemoryVoteRepository,
)
from teamboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests made through one
    container. Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_idea_repository(self) -> IdeaRepository:
        """Provide in-memory idea repository."""
        return InMemoryIdeaRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_task_repository(self) -> TaskRepository:
        """Provide in-memory task repository."""
        return InMemoryTaskRepository()

    @provide(scope=Scope.APP)
    def get_meeting_repository(self) -> MeetingRepository:
        """Provide in-memory meeting repository."""
        return InMemoryMeetingRepository()

    @provide(scope=Scope.APP)
    def get_preference_repository(self) -> PreferenceRepository:
        """Provide in-memory preference repository."""
        return InMemoryPreferenceRepository()
