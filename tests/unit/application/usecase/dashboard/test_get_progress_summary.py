"""Unit tests for GetProgressSummaryUseCase."""

from datetime import date

import pytest

from teamboard.application.usecase.dashboard import GetProgressSummaryUseCase
from teamboard.domain.repository import MeetingRepository, TaskRepository
from teamboard.domain.value import DeadlineBucket, TaskStatus
from tests.conftest import make_meeting, make_task
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetProgressSummaryUseCase:
    """Tests for GetProgressSummaryUseCase (clock pinned to 2024-06-10)."""

    @pytest.mark.asyncio
    async def test_empty_board(self, unit_env):
        use_case = await unit_env.get(GetProgressSummaryUseCase)

        summary = await use_case.execute()

        assert summary.total_tasks == 0
        assert summary.completion_rate == 0
        assert summary.urgent_deadlines == []
        assert summary.upcoming_meetings == []

    @pytest.mark.asyncio
    async def test_counters_and_lists(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetProgressSummaryUseCase)
        task_repo = await unit_env.get(TaskRepository)
        meeting_repo = await unit_env.get(MeetingRepository)

        for task in [
            make_task(date(2024, 6, 9), description="overdue"),
            make_task(date(2024, 6, 10), description="today"),
            make_task(date(2024, 6, 11), description="tomorrow"),
            make_task(date(2024, 6, 9), status=TaskStatus.DONE, description="done"),
            make_task(date(2024, 6, 20), description="later"),
            make_task("not a date", description="broken"),
        ]:
            await task_repo.save(task)

        for meeting in [
            make_meeting(date(2024, 6, 1), title="past"),
            make_meeting(date(2024, 6, 10), title="today"),
            make_meeting(date(2024, 6, 12), title="archived", is_archived=True),
            make_meeting(date(2024, 6, 15), title="mid"),
            make_meeting(date(2024, 6, 20), title="late"),
            make_meeting(date(2024, 6, 30), title="last"),
        ]:
            await meeting_repo.save(meeting)

        # Act
        summary = await use_case.execute()

        # Assert
        assert summary.total_tasks == 6
        assert summary.completed_tasks == 1
        assert summary.pending_tasks == 5
        assert summary.completion_rate == pytest.approx(16.67, abs=0.01)
        assert summary.due_today_count == 1
        assert summary.overdue_count == 1
        assert [t.description for t in summary.urgent_deadlines] == ["today", "tomorrow"]
        assert [t.bucket for t in summary.urgent_deadlines] == [
            DeadlineBucket.DUE_TODAY,
            DeadlineBucket.DUE_TOMORROW,
        ]
        assert [m.title for m in summary.upcoming_meetings] == ["today", "mid", "late"]
        assert summary.upcoming_meetings[0].bucket == DeadlineBucket.DUE_TODAY
        assert summary.upcoming_meetings[1].bucket == DeadlineBucket.NONE

    @pytest.mark.asyncio
    async def test_urgent_list_capped_at_five(self, unit_env):
        use_case = await unit_env.get(GetProgressSummaryUseCase)
        task_repo = await unit_env.get(TaskRepository)
        for _ in range(7):
            await task_repo.save(make_task(date(2024, 6, 11)))

        summary = await use_case.execute()

        assert len(summary.urgent_deadlines) == 5
