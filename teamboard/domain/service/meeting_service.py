"""Meeting domain service."""

from datetime import date
from uuid import uuid4

import logfire

from teamboard.domain.error import NotFoundError, ValidationError
from teamboard.domain.model.meeting import Meeting
from teamboard.domain.repository import MeetingRepository
from teamboard.domain.value import MeetingId

from .base import Service


def parse_agenda(text: str) -> list[str]:
    """Split agenda text into items, one per non-blank line."""
    return [line.strip() for line in text.splitlines() if line.strip()]


class MeetingService(Service):
    """Domain service for meeting operations."""

    def __init__(self, meeting_repository: MeetingRepository) -> None:
        """Initialize meeting service.

        Args:
            meeting_repository: Meeting repository
        """
        self.meeting_repository = meeting_repository

    @staticmethod
    def _check_required(title: str, time: str) -> None:
        if not title.strip() or not time.strip():
            raise ValidationError("Please fill in all required fields")

    async def create_meeting(
        self, title: str, meeting_date: date, time: str, agenda: str = ""
    ) -> Meeting:
        """Create an active meeting.

        Args:
            title: Meeting title
            meeting_date: Calendar day of the meeting
            time: Time of day as entered
            agenda: Agenda text, one item per line

        Returns:
            Saved meeting
        """
        with logfire.span("meeting_service.create_meeting", title=title):
            self._check_required(title, time)
            meeting = Meeting(
                id=MeetingId(str(uuid4())),
                title=title.strip(),
                date=meeting_date,
                time=time.strip(),
                agenda_items=parse_agenda(agenda),
                is_archived=False,
            )
            saved = await self.meeting_repository.save(meeting)
            logfire.info("Meeting created", meeting_id=saved.id)
            return saved

    async def update_meeting(
        self,
        meeting_id: MeetingId,
        title: str,
        meeting_date: date,
        time: str,
        agenda: str = "",
    ) -> Meeting:
        """Replace a meeting's title, date, time and agenda.

        Raises:
            NotFoundError: If meeting not found
        """
        with logfire.span("meeting_service.update_meeting", meeting_id=meeting_id):
            self._check_required(title, time)
            meeting = await self.meeting_repository.find_by_id(meeting_id)
            if not meeting:
                logfire.warn("Meeting not found for update", meeting_id=meeting_id)
                raise NotFoundError("Meeting", meeting_id)

            updated = meeting.model_copy(
                update={
                    "title": title.strip(),
                    "date": meeting_date,
                    "time": time.strip(),
                    "agenda_items": parse_agenda(agenda),
                }
            )
            saved = await self.meeting_repository.save(updated)
            logfire.info("Meeting updated", meeting_id=meeting_id)
            return saved

    async def get_meeting_by_id(self, meeting_id: MeetingId) -> Meeting | None:
        """Get a meeting by ID.

        Returns:
            Meeting if found, None otherwise
        """
        meeting = await self.meeting_repository.find_by_id(meeting_id)
        if not meeting:
            logfire.warn("Meeting not found", meeting_id=meeting_id)
        return meeting

    async def list_meetings(self) -> list[Meeting]:
        """List all meetings, earliest date first."""
        return await self.meeting_repository.find_all()
