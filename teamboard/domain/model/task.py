"""Action item entity."""

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator

from teamboard.domain.model.common import DomainModel
from teamboard.domain.value import MeetingId, TaskId, TaskStatus
from teamboard.domain.value.dates import lenient_calendar_date


class Task(DomainModel):
    """Action item with an assignee and a due date.

    A due date the store hands back in an unreadable form is kept as None,
    which excludes the task from deadline classification.
    """

    id: TaskId
    description: str = Field(min_length=1)
    assignee: str = Field(min_length=1, max_length=255)
    due_date: Optional[date] = None
    status: TaskStatus = TaskStatus.OPEN
    meeting_id: Optional[MeetingId] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def drop_invalid_due_date(cls, v: Any) -> Optional[date]:
        """Treat an unparsable due date as missing."""
        return lenient_calendar_date(v, field="task.due_date")

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE
