"""Preference repository interface."""

from abc import ABC, abstractmethod
from typing import Optional


class PreferenceRepository(ABC):
    """Key-value store for per-owner preferences.

    Values are stored as text, the way browser local storage keeps them.
    """

    @abstractmethod
    async def get(self, owner_id: str, key: str) -> Optional[str]:
        """Read a preference.

        Args:
            owner_id: Whose preference it is
            key: Preference key

        Returns:
            The stored text, or None if nothing is stored
        """
        pass

    @abstractmethod
    async def set(self, owner_id: str, key: str, value: str) -> None:
        """Write a preference, replacing any previous value."""
        pass
