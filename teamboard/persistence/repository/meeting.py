"""PostgreSQL implementation of Meeting repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamboard.domain.model import Meeting
from teamboard.domain.repository import MeetingRepository
from teamboard.domain.value import MeetingId
from teamboard.persistence.mappers import meeting_to_dict, row_to_meeting
from teamboard.persistence.tables import meetings_table


class PostgresMeetingRepository(MeetingRepository):
    """PostgreSQL implementation of MeetingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, meeting_id: MeetingId) -> Optional[Meeting]:
        """Find a meeting by ID."""
        stmt = select(meetings_table).where(meetings_table.c.id == meeting_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_meeting(row._asdict()) if row else None

    async def find_all(self) -> List[Meeting]:
        """Find all meetings, earliest date first."""
        stmt = select(meetings_table).order_by(meetings_table.c.date)
        result = await self.session.execute(stmt)
        return [row_to_meeting(row._asdict()) for row in result.fetchall()]

    async def save(self, meeting: Meeting) -> Meeting:
        """Save a meeting (create or update)."""
        existing = await self.find_by_id(meeting.id)
        meeting_dict = meeting_to_dict(meeting)

        if existing:
            stmt = (
                meetings_table.update()
                .where(meetings_table.c.id == meeting.id)
                .values(**meeting_dict)
            )
        else:
            stmt = meetings_table.insert().values(**meeting_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return meeting
