"""Create task use case."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.error import NotFoundError
from teamboard.domain.service import MeetingService, TaskService
from teamboard.domain.value import MeetingId, TaskStatus


class CreateTaskRequest(BaseModel):
    """Create task request."""

    description: str
    assignee: str = Field(max_length=255)
    due_date: date
    meeting_id: UUID | None = None


class CreateTaskResponse(BaseModel):
    """Create task response."""

    task_id: str
    status: TaskStatus
    due_date: date


class CreateTaskUseCase(BaseUseCase):
    """Use case for adding an action item."""

    def __init__(self, task_service: TaskService, meeting_service: MeetingService) -> None:
        self.task_service = task_service
        self.meeting_service = meeting_service

    async def execute(self, request: CreateTaskRequest) -> CreateTaskResponse:
        """Execute create task flow.

        Raises:
            NotFoundError: If the linked meeting does not exist
            ValidationError: If description or assignee is blank
        """
        meeting_id = None
        if request.meeting_id:
            meeting_id = MeetingId(str(request.meeting_id))
            if not await self.meeting_service.get_meeting_by_id(meeting_id):
                raise NotFoundError("Meeting", meeting_id)

        task = await self.task_service.create_task(
            description=request.description,
            assignee=request.assignee,
            due_date=request.due_date,
            meeting_id=meeting_id,
        )
        return CreateTaskResponse(
            task_id=task.id, status=task.status, due_date=request.due_date
        )
