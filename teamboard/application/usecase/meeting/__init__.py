"""Meeting use cases."""

from .create_meeting import CreateMeetingRequest, CreateMeetingUseCase, MeetingResponse
from .list_meetings import ListMeetingsResponse, ListMeetingsUseCase
from .update_meeting import UpdateMeetingRequest, UpdateMeetingUseCase

__all__ = [
    "CreateMeetingRequest",
    "CreateMeetingUseCase",
    "ListMeetingsResponse",
    "ListMeetingsUseCase",
    "MeetingResponse",
    "UpdateMeetingRequest",
    "UpdateMeetingUseCase",
]
