"""PostgreSQL implementation of Task repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamboard.domain.model import Task
from teamboard.domain.repository import TaskRepository
from teamboard.domain.value import TaskId
from teamboard.persistence.mappers import row_to_task, task_to_dict
from teamboard.persistence.tables import action_items_table


class PostgresTaskRepository(TaskRepository):
    """PostgreSQL implementation of TaskRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        stmt = select(action_items_table).where(action_items_table.c.id == task_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_task(row._asdict()) if row else None

    async def find_all(self) -> List[Task]:
        """Find all tasks, earliest due date first."""
        stmt = select(action_items_table).order_by(action_items_table.c.due_date)
        result = await self.session.execute(stmt)
        return [row_to_task(row._asdict()) for row in result.fetchall()]

    async def save(self, task: Task) -> Task:
        """Save a task (create or update)."""
        existing = await self.find_by_id(task.id)
        task_dict = task_to_dict(task)

        if existing:
            stmt = (
                action_items_table.update()
                .where(action_items_table.c.id == task.id)
                .values(**task_dict)
            )
        else:
            stmt = action_items_table.insert().values(**task_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return task
