"""Task use cases."""

from .create_task import CreateTaskRequest, CreateTaskResponse, CreateTaskUseCase
from .list_tasks import ListTasksResponse, ListTasksUseCase, TaskListItem
from .toggle_task_status import (
    ToggleTaskStatusRequest,
    ToggleTaskStatusResponse,
    ToggleTaskStatusUseCase,
)

__all__ = [
    "CreateTaskRequest",
    "CreateTaskResponse",
    "CreateTaskUseCase",
    "ListTasksResponse",
    "ListTasksUseCase",
    "TaskListItem",
    "ToggleTaskStatusRequest",
    "ToggleTaskStatusResponse",
    "ToggleTaskStatusUseCase",
]
