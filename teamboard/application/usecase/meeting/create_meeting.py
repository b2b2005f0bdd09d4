"""Create meeting use case."""

import datetime

from pydantic import BaseModel, Field

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.service import MeetingService


class CreateMeetingRequest(BaseModel):
    """Create meeting request."""

    title: str = Field(max_length=300)
    date: datetime.date
    time: str = Field(max_length=20)
    agenda: str = ""  # One item per line


class MeetingResponse(BaseModel):
    """Meeting as returned to the dashboard."""

    meeting_id: str
    title: str
    date: datetime.date | None
    time: str
    agenda_items: list[str]
    is_archived: bool


class CreateMeetingUseCase(BaseUseCase):
    """Use case for scheduling a meeting."""

    def __init__(self, meeting_service: MeetingService) -> None:
        self.meeting_service = meeting_service

    async def execute(self, request: CreateMeetingRequest) -> MeetingResponse:
        """Execute create meeting flow."""
        meeting = await self.meeting_service.create_meeting(
            title=request.title,
            meeting_date=request.date,
            time=request.time,
            agenda=request.agenda,
        )
        return MeetingResponse(
            meeting_id=meeting.id,
            title=meeting.title,
            date=meeting.date,
            time=meeting.time,
            agenda_items=meeting.agenda_items,
            is_archived=meeting.is_archived,
        )
