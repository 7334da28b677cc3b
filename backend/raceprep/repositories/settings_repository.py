"""App settings repository."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.models import AppSettings
from raceprep.repositories.base import BaseRepository

SETTINGS_ID = 1


class SettingsRepository(BaseRepository[AppSettings]):
    """Repository for the single AppSettings row."""

    def __init__(self, session: AsyncSession):
        super().__init__(AppSettings, session)

    async def get_settings(self) -> AppSettings:
        """Get stored settings, or unsaved defaults."""
        settings = await self.get(SETTINGS_ID)
        if settings is None:
            return AppSettings(id=SETTINGS_ID, notifications_enabled=False)
        return settings

    async def save(self, data: dict[str, Any]) -> AppSettings:
        """Store settings; there is only ever one row."""
        return await super().save({**data, "id": SETTINGS_ID})

    async def replace_all(self, rows: list[dict[str, Any]]) -> int:
        """Replace stored settings with the last given row."""
        return await super().replace_all([{**row, "id": SETTINGS_ID} for row in rows[-1:]])
