"""Meeting routes."""

import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from teamboard.application.usecase.meeting import (
    CreateMeetingRequest,
    CreateMeetingUseCase,
    ListMeetingsResponse,
    ListMeetingsUseCase,
    MeetingResponse,
    UpdateMeetingRequest,
    UpdateMeetingUseCase,
)
from teamboard.domain.error import DomainError
from teamboard.interface.error import raise_http_error

router = APIRouter(prefix="/meetings", tags=["meetings"], route_class=DishkaRoute)


class UpdateMeetingBody(BaseModel):
    """Update meeting request body."""

    title: str = Field(max_length=300)
    date: datetime.date
    time: str = Field(max_length=20)
    agenda: str = ""


@router.get("", response_model=ListMeetingsResponse)
async def list_meetings(
    list_meetings_use_case: FromDishka[ListMeetingsUseCase],
) -> ListMeetingsResponse:
    """List meetings, split into active and archived."""
    return await list_meetings_use_case.execute()


@router.post("", response_model=MeetingResponse, status_code=status.HTTP_201_CREATED)
async def create_meeting(
    request: CreateMeetingRequest,
    create_meeting_use_case: FromDishka[CreateMeetingUseCase],
) -> MeetingResponse:
    """Schedule a meeting."""
    try:
        return await create_meeting_use_case.execute(request)
    except DomainError as e:
        raise_http_error(e)


@router.put("/{meeting_id}", response_model=MeetingResponse)
async def update_meeting(
    meeting_id: UUID,
    body: UpdateMeetingBody,
    update_meeting_use_case: FromDishka[UpdateMeetingUseCase],
) -> MeetingResponse:
    """Edit a meeting's title, date, time and agenda."""
    try:
        return await update_meeting_use_case.execute(
            UpdateMeetingRequest(meeting_id=str(meeting_id), **body.model_dump())
        )
    except DomainError as e:
        raise_http_error(e)
