"""Tests for app settings repository."""

import pytest

from raceprep.repositories import SettingsRepository
from raceprep.repositories.settings_repository import SETTINGS_ID


class TestSettingsRepository:
    """Tests for SettingsRepository."""

    @pytest.mark.asyncio
    async def test_defaults_when_missing(self, db_session):
        """Missing settings come back as unsaved defaults."""
        repo = SettingsRepository(db_session)

        settings = await repo.get_settings()

        assert settings.notifications_enabled is False
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_save_single_row(self, db_session):
        repo = SettingsRepository(db_session)

        await repo.save({"notifications_enabled": True})
        await repo.save({"id": 7, "notifications_enabled": True})

        assert await repo.count() == 1
        settings = await repo.get_settings()
        assert settings.id == SETTINGS_ID
        assert settings.notifications_enabled is True

    @pytest.mark.asyncio
    async def test_replace_all_keeps_last(self, db_session):
        repo = SettingsRepository(db_session)
        await repo.save({"notifications_enabled": False})

        written = await repo.replace_all([
            {"notifications_enabled": False},
            {"notifications_enabled": True},
        ])

        assert written == 1
        assert (await repo.get_settings()).notifications_enabled is True
