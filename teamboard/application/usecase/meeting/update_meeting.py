"""Update meeting use case."""

import datetime

from pydantic import BaseModel, Field

from teamboard.application.usecase.base import BaseUseCase
from teamboard.application.usecase.meeting.create_meeting import MeetingResponse
from teamboard.domain.service import MeetingService
from teamboard.domain.value import MeetingId


class UpdateMeetingRequest(BaseModel):
    """Update meeting request."""

    meeting_id: str
    title: str = Field(max_length=300)
    date: datetime.date
    time: str = Field(max_length=20)
    agenda: str = ""


class UpdateMeetingUseCase(BaseUseCase):
    """Use case for editing a meeting."""

    def __init__(self, meeting_service: MeetingService) -> None:
        self.meeting_service = meeting_service

    async def execute(self, request: UpdateMeetingRequest) -> MeetingResponse:
        """Execute update meeting flow.

        Raises:
            NotFoundError: If meeting not found
        """
        meeting = await self.meeting_service.update_meeting(
            MeetingId(request.meeting_id),
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
