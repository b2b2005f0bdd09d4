"""List meetings use case."""

from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.application.usecase.meeting.create_meeting import MeetingResponse
from teamboard.domain.model import Meeting
from teamboard.domain.service import MeetingService


class ListMeetingsResponse(BaseModel):
    """Meetings split into the active and archived tabs."""

    active: list[MeetingResponse]
    archived: list[MeetingResponse]


def _to_response(meeting: Meeting) -> MeetingResponse:
    return MeetingResponse(
        meeting_id=meeting.id,
        title=meeting.title,
        date=meeting.date,
        time=meeting.time,
        agenda_items=meeting.agenda_items,
        is_archived=meeting.is_archived,
    )


class ListMeetingsUseCase(BaseUseCase):
    """Use case for the meetings view."""

    def __init__(self, meeting_service: MeetingService) -> None:
        self.meeting_service = meeting_service

    async def execute(self, request: None = None) -> ListMeetingsResponse:
        """Execute list meetings flow."""
        meetings = await self.meeting_service.list_meetings()
        return ListMeetingsResponse(
            active=[_to_response(m) for m in meetings if not m.is_archived],
            archived=[_to_response(m) for m in meetings if m.is_archived],
        )
