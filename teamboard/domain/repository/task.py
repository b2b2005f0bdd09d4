"""Task repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from teamboard.domain.model.task import Task
from teamboard.domain.value import TaskId


class TaskRepository(ABC):
    """Repository for action items."""

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID.

        Args:
            task_id: The task's unique identifier

        Returns:
            The task if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """Find all tasks, earliest due date first."""
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Save a task (create or update)."""
        pass
