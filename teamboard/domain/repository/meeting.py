"""Meeting repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from teamboard.domain.model.meeting import Meeting
from teamboard.domain.value import MeetingId


class MeetingRepository(ABC):
    """Repository for meetings."""

    @abstractmethod
    async def find_by_id(self, meeting_id: MeetingId) -> Optional[Meeting]:
        """Find a meeting by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Meeting]:
        """Find all meetings, earliest date first."""
        pass

    @abstractmethod
    async def save(self, meeting: Meeting) -> Meeting:
        """Save a meeting (create or update)."""
        pass
