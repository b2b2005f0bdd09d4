"""In-memory preference repository for testing."""

from typing import Optional

from teamboard.domain.repository.preference import PreferenceRepository


class InMemoryPreferenceRepository(PreferenceRepository):
    """In-memory implementation of PreferenceRepository for testing."""

    def __init__(self) -> None:
        self._values: dict[tuple[str, str], str] = {}

    async def get(self, owner_id: str, key: str) -> Optional[str]:
        """Read a preference."""
        return self._values.get((owner_id, key))

    async def set(self, owner_id: str, key: str, value: str) -> None:
        """Write a preference."""
        self._values[(owner_id, key)] = value
