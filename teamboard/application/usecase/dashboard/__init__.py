"""Dashboard use cases."""

from .get_progress_summary import (
    GetProgressSummaryUseCase,
    ProgressSummaryResponse,
    UpcomingMeeting,
    UrgentTask,
)

__all__ = [
    "GetProgressSummaryUseCase",
    "ProgressSummaryResponse",
    "UpcomingMeeting",
    "UrgentTask",
]
