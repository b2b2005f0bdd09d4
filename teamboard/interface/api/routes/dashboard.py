"""Dashboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from teamboard.application.usecase.dashboard import (
    GetProgressSummaryUseCase,
    ProgressSummaryResponse,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"], route_class=DishkaRoute)


@router.get("/summary", response_model=ProgressSummaryResponse)
async def get_progress_summary(
    summary_use_case: FromDishka[GetProgressSummaryUseCase],
) -> ProgressSummaryResponse:
    """Progress counters, urgent deadlines and upcoming meetings."""
    return await summary_use_case.execute()
