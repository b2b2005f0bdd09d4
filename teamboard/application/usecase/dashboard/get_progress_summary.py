"""Progress summary use case."""

from datetime import date

import logfire
from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.config import DashboardSettings
from teamboard.domain.policy import (
    classify,
    completion_rate,
    count_by_bucket,
    meeting_bucket,
    upcoming_meetings,
    urgent_list,
)
from teamboard.domain.service import MeetingService, TaskService
from teamboard.domain.value import DeadlineBucket
from teamboard.util.clock import Clock


class UrgentTask(BaseModel):
    """Task under "Urgent Deadlines"."""

    task_id: str
    description: str
    assignee: str
    due_date: date
    bucket: DeadlineBucket


class UpcomingMeeting(BaseModel):
    """Meeting under "Upcoming Meetings"."""

    meeting_id: str
    title: str
    date: date
    time: str
    bucket: DeadlineBucket


class ProgressSummaryResponse(BaseModel):
    """Counters and lists for the progress overview."""

    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    completion_rate: float
    due_today_count: int
    overdue_count: int
    urgent_deadlines: list[UrgentTask]
    upcoming_meetings: list[UpcomingMeeting]


class GetProgressSummaryUseCase(BaseUseCase):
    """Use case for the progress summary panel."""

    def __init__(
        self,
        task_service: TaskService,
        meeting_service: MeetingService,
        clock: Clock,
        dashboard_settings: DashboardSettings,
    ) -> None:
        """Initialize progress summary use case.

        Args:
            task_service: Task domain service
            meeting_service: Meeting domain service
            clock: Source of the current time
            dashboard_settings: List limits
        """
        self.task_service = task_service
        self.meeting_service = meeting_service
        self.clock = clock
        self.dashboard_settings = dashboard_settings

    async def execute(self, request: None = None) -> ProgressSummaryResponse:
        """Execute progress summary flow.

        One snapshot of tasks and meetings is classified against one instant.
        """
        with logfire.span("get_progress_summary.execute"):
            now = self.clock.now()
            tasks = await self.task_service.list_tasks()
            meetings = await self.meeting_service.list_meetings()

            completed = sum(1 for task in tasks if task.is_done)
            counts = count_by_bucket(tasks, now)

            urgent = [
                UrgentTask(
                    task_id=task.id,
                    description=task.description,
                    assignee=task.assignee,
                    due_date=task.due_date,
                    bucket=classify(task, now),
                )
                for task in urgent_list(
                    tasks, now, limit=self.dashboard_settings.urgent_limit
                )
            ]
            upcoming = [
                UpcomingMeeting(
                    meeting_id=meeting.id,
                    title=meeting.title,
                    date=meeting.date,
                    time=meeting.time,
                    bucket=meeting_bucket(meeting, now),
                )
                for meeting in upcoming_meetings(
                    meetings, now, limit=self.dashboard_settings.upcoming_meetings_limit
                )
            ]

            logfire.info(
                "Progress summary computed",
                total=len(tasks),
                overdue=counts[DeadlineBucket.OVERDUE],
                urgent=len(urgent),
            )

            return ProgressSummaryResponse(
                total_tasks=len(tasks),
                completed_tasks=completed,
                pending_tasks=len(tasks) - completed,
                completion_rate=round(completion_rate(tasks), 2),
                due_today_count=counts[DeadlineBucket.DUE_TODAY],
                overdue_count=counts[DeadlineBucket.OVERDUE],
                urgent_deadlines=urgent,
                upcoming_meetings=upcoming,
            )
