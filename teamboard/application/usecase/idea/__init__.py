"""Idea use cases."""

from .list_ideas import IdeaListItem, ListIdeasRequest, ListIdeasResponse, ListIdeasUseCase
from .submit_idea import SubmitIdeaRequest, SubmitIdeaResponse, SubmitIdeaUseCase

__all__ = [
    "IdeaListItem",
    "ListIdeasRequest",
    "ListIdeasResponse",
    "ListIdeasUseCase",
    "SubmitIdeaRequest",
    "SubmitIdeaResponse",
    "SubmitIdeaUseCase",
]
