"""In-memory meeting repository for testing."""

from datetime import date
from typing import Optional

from teamboard.domain.model.meeting import Meeting
from teamboard.domain.repository.meeting import MeetingRepository
from teamboard.domain.value import MeetingId


class InMemoryMeetingRepository(MeetingRepository):
    """In-memory implementation of MeetingRepository for testing."""

    def __init__(self) -> None:
        self._meetings: dict[MeetingId, Meeting] = {}

    async def find_by_id(self, meeting_id: MeetingId) -> Optional[Meeting]:
        """Find a meeting by ID."""
        return self._meetings.get(meeting_id)

    async def find_all(self) -> list[Meeting]:
        """Find all meetings, earliest date first (undated last)."""
        return sorted(self._meetings.values(), key=lambda m: m.date or date.max)

    async def save(self, meeting: Meeting) -> Meeting:
        """Save a meeting."""
        self._meetings[meeting.id] = meeting
        return meeting
