"""Domain services."""

from .base import Service
from .idea_service import IdeaService
from .meeting_service import MeetingService, parse_agenda
from .preference_service import PreferenceService
from .task_service import TaskService
from .vote_service import VoteService

__all__ = [
    "IdeaService",
    "MeetingService",
    "PreferenceService",
    "Service",
    "TaskService",
    "VoteService",
    "parse_agenda",
]
