"""Application layer DI providers."""

from dishka import Scope, provide

from teamboard.application.usecase.dashboard import GetProgressSummaryUseCase
from teamboard.application.usecase.idea import ListIdeasUseCase, SubmitIdeaUseCase
from teamboard.application.usecase.meeting import (
    CreateMeetingUseCase,
    ListMeetingsUseCase,
    UpdateMeetingUseCase,
)
from teamboard.application.usecase.preference import GetThemeUseCase, UpdateThemeUseCase
from teamboard.application.usecase.task import (
    CreateTaskUseCase,
    ListTasksUseCase,
    ToggleTaskStatusUseCase,
)
from teamboard.application.usecase.vote import CastVoteUseCase
from teamboard.config import DashboardSettings
from teamboard.domain.service import (
    IdeaService,
    MeetingService,
    PreferenceService,
    TaskService,
    VoteService,
)
from teamboard.util.clock import Clock
from teamboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Idea use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_idea_use_case(self, idea_service: IdeaService) -> SubmitIdeaUseCase:
        """Provide submit idea use case."""
        return SubmitIdeaUseCase(idea_service=idea_service)

    @provide(scope=Scope.REQUEST)
    def get_list_ideas_use_case(
        self, idea_service: IdeaService, vote_service: VoteService
    ) -> ListIdeasUseCase:
        """Provide list ideas use case."""
        return ListIdeasUseCase(idea_service=idea_service, vote_service=vote_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Task use cases
    @provide(scope=Scope.REQUEST)
    def get_create_task_use_case(
        self, task_service: TaskService, meeting_service: MeetingService
    ) -> CreateTaskUseCase:
        """Provide create task use case."""
        return CreateTaskUseCase(
            task_service=task_service, meeting_service=meeting_service
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_task_status_use_case(
        self, task_service: TaskService
    ) -> ToggleTaskStatusUseCase:
        """Provide toggle task status use case."""
        return ToggleTaskStatusUseCase(task_service=task_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tasks_use_case(
        self, task_service: TaskService, meeting_service: MeetingService, clock: Clock
    ) -> ListTasksUseCase:
        """Provide list tasks use case."""
        return ListTasksUseCase(
            task_service=task_service, meeting_service=meeting_service, clock=clock
        )

    # Meeting use cases
    @provide(scope=Scope.REQUEST)
    def get_create_meeting_use_case(
        self, meeting_service: MeetingService
    ) -> CreateMeetingUseCase:
        """Provide create meeting use case."""
        return CreateMeetingUseCase(meeting_service=meeting_service)

    @provide(scope=Scope.REQUEST)
    def get_update_meeting_use_case(
        self, meeting_service: MeetingService
    ) -> UpdateMeetingUseCase:
        """Provide update meeting use case."""
        return UpdateMeetingUseCase(meeting_service=meeting_service)

    @provide(scope=Scope.REQUEST)
    def get_list_meetings_use_case(
        self, meeting_service: MeetingService
    ) -> ListMeetingsUseCase:
        """Provide list meetings use case."""
        return ListMeetingsUseCase(meeting_service=meeting_service)

    # Dashboard use cases
    @provide(scope=Scope.REQUEST)
    def get_progress_summary_use_case(
        self,
        task_service: TaskService,
        meeting_service: MeetingService,
        clock: Clock,
        dashboard_settings: DashboardSettings,
    ) -> GetProgressSummaryUseCase:
        """Provide progress summary use case."""
        return GetProgressSummaryUseCase(
            task_service=task_service,
            meeting_service=meeting_service,
            clock=clock,
            dashboard_settings=dashboard_settings,
        )

    # Preference use cases
    @provide(scope=Scope.REQUEST)
    def get_get_theme_use_case(
        self, preference_service: PreferenceService
    ) -> GetThemeUseCase:
        """Provide get theme use case."""
        return GetThemeUseCase(preference_service=preference_service)

    @provide(scope=Scope.REQUEST)
    def get_update_theme_use_case(
        self, preference_service: PreferenceService
    ) -> UpdateThemeUseCase:
        """Provide update theme use case."""
        return UpdateThemeUseCase(preference_service=preference_service)
