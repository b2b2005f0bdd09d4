"""List tasks use case."""

from datetime import date

import logfire
from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.policy import classify
from teamboard.domain.service import MeetingService, TaskService
from teamboard.domain.value import DeadlineBucket, TaskStatus
from teamboard.util.clock import Clock

NO_MEETING = "No meeting"


class TaskListItem(BaseModel):
    """Row of the action items table."""

    task_id: str
    description: str
    assignee: str
    due_date: date | None
    status: TaskStatus
    bucket: DeadlineBucket
    is_overdue: bool
    meeting_id: str | None
    meeting_title: str


class ListTasksResponse(BaseModel):
    """List tasks response."""

    tasks: list[TaskListItem]


class ListTasksUseCase(BaseUseCase):
    """Use case for the action items table."""

    def __init__(
        self, task_service: TaskService, meeting_service: MeetingService, clock: Clock
    ) -> None:
        """Initialize list tasks use case.

        Args:
            task_service: Task domain service
            meeting_service: Meeting domain service
            clock: Source of the current time
        """
        self.task_service = task_service
        self.meeting_service = meeting_service
        self.clock = clock

    async def execute(self, request: None = None) -> ListTasksResponse:
        """Execute list tasks flow."""
        with logfire.span("list_tasks.execute"):
            now = self.clock.now()
            tasks = await self.task_service.list_tasks()
            titles = {m.id: m.title for m in await self.meeting_service.list_meetings()}

            items = []
            for task in tasks:
                bucket = classify(task, now)
                items.append(
                    TaskListItem(
                        task_id=task.id,
                        description=task.description,
                        assignee=task.assignee,
                        due_date=task.due_date,
                        status=task.status,
                        bucket=bucket,
                        is_overdue=bucket == DeadlineBucket.OVERDUE,
                        meeting_id=task.meeting_id,
                        meeting_title=titles.get(task.meeting_id, NO_MEETING)
                        if task.meeting_id
                        else NO_MEETING,
                    )
                )

            return ListTasksResponse(tasks=items)
