"""Personalization profile service."""

from datetime import date

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.checklist import IdFactory, apply_personalization, default_profile, new_id
from raceprep.repositories import ProfileRepository, RaceRepository, TaskRepository
from raceprep.schemas import ProfileSchema, ProfileUpdate, RaceSchema, TaskSchema


class ProfileService:
    """Service for reading and applying personalization profiles."""

    def __init__(self, session: AsyncSession, id_factory: IdFactory = new_id):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.task_repo = TaskRepository(session)
        self.profile_repo = ProfileRepository(session)
        self.id_factory = id_factory

    async def get_profile(self, race_id: str) -> ProfileSchema | None:
        """Stored profile, or one inferred from the race if none was applied yet."""
        race = await self.race_repo.get(race_id)
        if not race:
            return None

        profile = await self.profile_repo.get_by_race(race_id)
        if profile:
            return ProfileSchema.model_validate(profile)
        return default_profile(RaceSchema.model_validate(race))

    async def apply_profile(
        self,
        race_id: str,
        data: ProfileUpdate,
        today: date | None = None,
    ) -> list[TaskSchema] | None:
        """
        Save profile changes and reconcile the race's tasks with them.

        Returns:
            The race's full task list after reconciliation, or None if the
            race does not exist
        """
        race = await self.race_repo.get(race_id)
        if not race:
            return None

        current = await self.get_profile(race_id)
        profile = current.model_copy(update=data.model_dump(exclude_none=True))
        await self.profile_repo.save(profile.model_dump())

        existing = [TaskSchema.model_validate(task) for task in await self.task_repo.list_for_race(race_id)]
        tasks = apply_personalization(
            existing,
            RaceSchema.model_validate(race),
            profile,
            today=today,
            id_factory=self.id_factory,
        )
        await self.task_repo.save_many([task.model_dump() for task in tasks])

        logger.info(
            "Applied personalization",
            race_id=race_id,
            added=len(tasks) - len(existing),
            hidden=sum(1 for task in tasks if task.is_hidden),
        )
        return tasks
