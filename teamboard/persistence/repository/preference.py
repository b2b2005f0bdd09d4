"""PostgreSQL implementation of Preference repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from teamboard.domain.repository import PreferenceRepository
from teamboard.persistence.tables import preferences_table


class PostgresPreferenceRepository(PreferenceRepository):
    """PostgreSQL implementation of PreferenceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, owner_id: str, key: str) -> Optional[str]:
        """Read a preference."""
        stmt = select(preferences_table.c.value).where(
            and_(
                preferences_table.c.owner_id == owner_id,
                preferences_table.c.key == key,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def set(self, owner_id: str, key: str, value: str) -> None:
        """Write a preference (upsert)."""
        stmt = insert(preferences_table).values(owner_id=owner_id, key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[preferences_table.c.owner_id, preferences_table.c.key],
            set_={"value": stmt.excluded.value},
        )
        await self.session.execute(stmt)
        await self.session.flush()
