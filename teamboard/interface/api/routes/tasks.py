"""Action item routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from teamboard.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskResponse,
    CreateTaskUseCase,
    ListTasksResponse,
    ListTasksUseCase,
    ToggleTaskStatusRequest,
    ToggleTaskStatusResponse,
    ToggleTaskStatusUseCase,
)
from teamboard.domain.error import DomainError
from teamboard.interface.error import raise_http_error

router = APIRouter(prefix="/tasks", tags=["tasks"], route_class=DishkaRoute)


@router.get("", response_model=ListTasksResponse)
async def list_tasks(
    list_tasks_use_case: FromDishka[ListTasksUseCase],
) -> ListTasksResponse:
    """List action items with their deadline buckets."""
    return await list_tasks_use_case.execute()


@router.post("", response_model=CreateTaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    create_task_use_case: FromDishka[CreateTaskUseCase],
) -> CreateTaskResponse:
    """Create an action item."""
    try:
        return await create_task_use_case.execute(request)
    except DomainError as e:
        raise_http_error(e)


@router.post("/{task_id}/toggle", response_model=ToggleTaskStatusResponse)
async def toggle_task_status(
    task_id: UUID,
    toggle_use_case: FromDishka[ToggleTaskStatusUseCase],
) -> ToggleTaskStatusResponse:
    """Mark an action item done, or open again."""
    try:
        return await toggle_use_case.execute(ToggleTaskStatusRequest(task_id=str(task_id)))
    except DomainError as e:
        raise_http_error(e)
