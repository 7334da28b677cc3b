"""Backup export/import and app settings."""

import json
from datetime import datetime

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.errors import InvalidBackupError
from raceprep.models.base import utcnow
from raceprep.repositories import (
    ProfileRepository,
    RaceRepository,
    SettingsRepository,
    TaskRepository,
)
from raceprep.schemas import (
    AppSettingsSchema,
    BackupBundle,
    ImportBundle,
    ProfileSchema,
    RaceSchema,
    TaskSchema,
)


class DataService:
    """Moves every stored collection in and out as one bundle."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.task_repo = TaskRepository(session)
        self.profile_repo = ProfileRepository(session)
        self.settings_repo = SettingsRepository(session)

    async def get_settings(self) -> AppSettingsSchema:
        """Get app settings."""
        return AppSettingsSchema.model_validate(await self.settings_repo.get_settings())

    async def update_settings(self, data: AppSettingsSchema) -> AppSettingsSchema:
        """Replace app settings."""
        settings = await self.settings_repo.save(data.model_dump())
        return AppSettingsSchema.model_validate(settings)

    async def export_all(self, now: datetime | None = None) -> BackupBundle:
        """Export races, tasks, profiles and settings."""
        races = await self.race_repo.get_all()
        tasks = await self.task_repo.get_all()
        profiles = await self.profile_repo.get_all()

        bundle = BackupBundle(
            races=[RaceSchema.model_validate(race) for race in races],
            tasks=[TaskSchema.model_validate(task) for task in tasks],
            profiles=[ProfileSchema.model_validate(profile) for profile in profiles],
            settings=await self.get_settings(),
            exported_at=now or utcnow(),
        )
        logger.info("Exported data", races=len(bundle.races), tasks=len(bundle.tasks))
        return bundle

    async def import_data(self, bundle: ImportBundle) -> dict[str, int]:
        """
        Replace stored collections with the ones present in the bundle.

        Collections missing from the bundle are left untouched.

        Returns:
            Number of records written per collection
        """
        counts: dict[str, int] = {}

        if bundle.races is not None:
            counts["races"] = await self.race_repo.replace_all(
                [race.model_dump() for race in bundle.races]
            )
        if bundle.tasks is not None:
            counts["tasks"] = await self.task_repo.replace_all(
                [task.model_dump() for task in bundle.tasks]
            )
        if bundle.profiles is not None:
            counts["profiles"] = await self.profile_repo.replace_all(
                [profile.model_dump() for profile in bundle.profiles]
            )
        if bundle.settings is not None:
            counts["settings"] = await self.settings_repo.replace_all([bundle.settings.model_dump()])

        logger.info("Imported data", **counts)
        return counts

    @staticmethod
    def load_backup(text: str) -> ImportBundle:
        """Parse backup JSON, requiring at least races and tasks."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidBackupError("Could not read backup: invalid JSON") from exc

        if not isinstance(data, dict) or "races" not in data or "tasks" not in data:
            raise InvalidBackupError("Invalid backup: missing races or tasks data")

        try:
            return ImportBundle.model_validate(data)
        except ValidationError as exc:
            raise InvalidBackupError(f"Invalid backup: {exc}") from exc

    @staticmethod
    def backup_filename(now: datetime | None = None) -> str:
        """File name used for exports, e.g. race-prep-backup-2025-02-01.json."""
        return f"race-prep-backup-{(now or utcnow()).date().isoformat()}.json"
