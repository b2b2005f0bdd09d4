"""Preference domain service."""

import logfire

from teamboard.domain.repository import PreferenceRepository
from teamboard.domain.value import ThemePreference

from .base import Service

DARK_MODE_KEY = "darkMode"


class PreferenceService(Service):
    """Reads and writes the dashboard theme through the preference store."""

    def __init__(self, preference_repository: PreferenceRepository) -> None:
        self.preference_repository = preference_repository

    async def get_theme(
        self, owner_id: str, system_prefers_dark: bool = False
    ) -> ThemePreference:
        """Resolve the theme for an owner.

        A stored ``"true"`` means dark. With nothing stored the system
        preference decides; any other stored value means light.
        """
        stored = await self.preference_repository.get(owner_id, DARK_MODE_KEY)
        if stored is None:
            return ThemePreference(dark_mode=system_prefers_dark)
        return ThemePreference(dark_mode=stored == "true")

    async def set_theme(self, owner_id: str, dark_mode: bool) -> ThemePreference:
        """Store the theme for an owner."""
        await self.preference_repository.set(
            owner_id, DARK_MODE_KEY, "true" if dark_mode else "false"
        )
        logfire.info("Theme preference stored", owner_id=owner_id, dark_mode=dark_mode)
        return ThemePreference(dark_mode=dark_mode)
