"""Meeting entity."""

import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from teamboard.domain.model.common import DomainModel
from teamboard.domain.value import MeetingId
from teamboard.domain.value.dates import lenient_calendar_date


class Meeting(DomainModel):
    """Team meeting with an agenda."""

    id: MeetingId
    title: str = Field(min_length=1, max_length=300)
    date: Optional[datetime.date] = None
    time: str = Field(min_length=1, max_length=20)  # Free-form, e.g. "10:30"
    agenda_items: list[str] = []
    is_archived: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def drop_invalid_date(cls, v: Any) -> Optional[datetime.date]:
        """Treat an unparsable meeting date as missing."""
        return lenient_calendar_date(v, field="meeting.date")
