"""Preference use cases."""

from .get_theme import GetThemeRequest, GetThemeUseCase, ThemeResponse
from .update_theme import UpdateThemeRequest, UpdateThemeUseCase

__all__ = [
    "GetThemeRequest",
    "GetThemeUseCase",
    "ThemeResponse",
    "UpdateThemeRequest",
    "UpdateThemeUseCase",
]
