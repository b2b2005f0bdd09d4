"""Toggle task status use case."""

from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.service import TaskService
from teamboard.domain.value import TaskId, TaskStatus


class ToggleTaskStatusRequest(BaseModel):
    """Toggle task status request."""

    task_id: str


class ToggleTaskStatusResponse(BaseModel):
    """Toggle task status response."""

    task_id: str
    status: TaskStatus
    message: str


class ToggleTaskStatusUseCase(BaseUseCase):
    """Use case for ticking an action item on or off."""

    def __init__(self, task_service: TaskService) -> None:
        self.task_service = task_service

    async def execute(self, request: ToggleTaskStatusRequest) -> ToggleTaskStatusResponse:
        """Execute toggle flow.

        Raises:
            NotFoundError: If task not found
        """
        task = await self.task_service.toggle_status(TaskId(request.task_id))
        return ToggleTaskStatusResponse(
            task_id=task.id,
            status=task.status,
            message=f"Task marked as {task.status.value}",
        )
