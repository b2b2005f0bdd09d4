"""Action item domain service."""

from datetime import date
from uuid import uuid4

import logfire

from teamboard.domain.error import NotFoundError, ValidationError
from teamboard.domain.model.task import Task
from teamboard.domain.repository import TaskRepository
from teamboard.domain.value import MeetingId, TaskId, TaskStatus

from .base import Service


class TaskService(Service):
    """Domain service for action item operations."""

    def __init__(self, task_repository: TaskRepository) -> None:
        """Initialize task service.

        Args:
            task_repository: Task repository
        """
        self.task_repository = task_repository

    async def create_task(
        self,
        description: str,
        assignee: str,
        due_date: date,
        meeting_id: MeetingId | None = None,
    ) -> Task:
        """Create an open action item.

        Args:
            description: What needs doing
            assignee: Who does it
            due_date: When it is due
            meeting_id: Meeting the item came out of, if any

        Returns:
            Saved task

        Raises:
            ValidationError: If description or assignee is blank
        """
        with logfire.span("task_service.create_task", assignee=assignee):
            if not description.strip() or not assignee.strip():
                raise ValidationError("Please fill in all required fields")

            task = Task(
                id=TaskId(str(uuid4())),
                description=description.strip(),
                assignee=assignee.strip(),
                due_date=due_date,
                status=TaskStatus.OPEN,
                meeting_id=meeting_id or None,
            )
            saved = await self.task_repository.save(task)
            logfire.info("Task created", task_id=saved.id, due_date=str(due_date))
            return saved

    async def toggle_status(self, task_id: TaskId) -> Task:
        """Flip a task between open and done.

        Raises:
            NotFoundError: If task not found
        """
        with logfire.span("task_service.toggle_status", task_id=task_id):
            task = await self.task_repository.find_by_id(task_id)
            if not task:
                logfire.warn("Task not found for status toggle", task_id=task_id)
                raise NotFoundError("Task", task_id)

            updated = task.model_copy(update={"status": task.status.toggled()})
            saved = await self.task_repository.save(updated)
            logfire.info("Task status toggled", task_id=task_id, status=saved.status.value)
            return saved

    async def list_tasks(self) -> list[Task]:
        """List all tasks, earliest due date first."""
        return await self.task_repository.find_all()
