"""Unit tests for MeetingService."""

from datetime import date

import pytest

from teamboard.domain.error import NotFoundError, ValidationError
from teamboard.domain.service import MeetingService, parse_agenda
from teamboard.domain.value import MeetingId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestParseAgenda:
    """Tests for parse_agenda."""

    def test_one_item_per_non_blank_line(self):
        assert parse_agenda("Intro\n\n  Budget  \n\nAOB\n") == ["Intro", "Budget", "AOB"]

    def test_empty_text(self):
        assert parse_agenda("") == []


class TestMeetingService:
    """Tests for MeetingService."""

    @pytest.mark.asyncio
    async def test_create_meeting(self, unit_env):
        meeting_service = await unit_env.get(MeetingService)

        meeting = await meeting_service.create_meeting(
            "Weekly sync", date(2024, 6, 12), "10:30", "Intro\nReview"
        )

        assert meeting.is_archived is False
        assert meeting.agenda_items == ["Intro", "Review"]

    @pytest.mark.asyncio
    async def test_create_meeting_requires_title(self, unit_env):
        meeting_service = await unit_env.get(MeetingService)

        with pytest.raises(ValidationError):
            await meeting_service.create_meeting("", date(2024, 6, 12), "10:30")

    @pytest.mark.asyncio
    async def test_update_meeting_replaces_fields(self, unit_env):
        # Arrange
        meeting_service = await unit_env.get(MeetingService)
        meeting = await meeting_service.create_meeting(
            "Weekly sync", date(2024, 6, 12), "10:30", "Intro"
        )

        # Act
        updated = await meeting_service.update_meeting(
            meeting.id, "Retro", date(2024, 6, 14), "15:00", "Wins\nMisses"
        )

        # Assert
        assert updated.id == meeting.id
        assert updated.title == "Retro"
        assert updated.date == date(2024, 6, 14)
        assert updated.agenda_items == ["Wins", "Misses"]

    @pytest.mark.asyncio
    async def test_update_missing_meeting_raises(self, unit_env):
        meeting_service = await unit_env.get(MeetingService)

        with pytest.raises(NotFoundError):
            await meeting_service.update_meeting(
                MeetingId("missing"), "Retro", date(2024, 6, 14), "15:00"
            )
