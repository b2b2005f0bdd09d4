"""In-memory task repository for testing."""

from datetime import date
from typing import Optional

from teamboard.domain.model.task import Task
from teamboard.domain.repository.task import TaskRepository
from teamboard.domain.value import TaskId


class InMemoryTaskRepository(TaskRepository):
    """In-memory implementation of TaskRepository for testing."""

    def __init__(self) -> None:
        self._tasks: dict[TaskId, Task] = {}

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        return self._tasks.get(task_id)

    async def find_all(self) -> list[Task]:
        """Find all tasks, earliest due date first (undated last)."""
        return sorted(self._tasks.values(), key=lambda t: t.due_date or date.max)

    async def save(self, task: Task) -> Task:
        """Save a task."""
        self._tasks[task.id] = task
        return task
