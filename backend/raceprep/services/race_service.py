"""Race service."""

from datetime import date

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.checklist import (
    IdFactory,
    calculate_progress,
    days_until_race,
    duplicate_race,
    generate_default_checklist,
    get_current_milestone,
    get_tasks_due_now,
    new_id,
    summarize_milestones,
)
from raceprep.errors import PastRaceDateError
from raceprep.models import Race
from raceprep.models.base import utcnow
from raceprep.repositories import RaceRepository, TaskRepository
from raceprep.schemas import (
    MilestoneSummarySchema,
    ProgressSchema,
    RaceCreate,
    RaceDuplicate,
    RaceOverview,
    RaceSchema,
    RaceUpdate,
    TaskSchema,
)


class RaceService:
    """Service for race operations."""

    def __init__(self, session: AsyncSession, id_factory: IdFactory = new_id):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.task_repo = TaskRepository(session)
        self.id_factory = id_factory

    async def get_race(self, race_id: str) -> RaceSchema | None:
        """Get a race by ID."""
        race = await self.race_repo.get(race_id)
        if not race:
            return None
        return self._to_schema(race)

    async def get_races(
        self,
        skip: int = 0,
        limit: int | None = None,
    ) -> tuple[list[RaceSchema], int]:
        """Get races ordered by date with the total count."""
        races = await self.race_repo.get_ordered_by_date(skip=skip, limit=limit)
        total = await self.race_repo.count()
        return [self._to_schema(race) for race in races], total

    async def get_upcoming_races(self, today: date | None = None) -> list[RaceSchema]:
        """Get races on or after today."""
        races = await self.race_repo.get_upcoming(today or date.today())
        return [self._to_schema(race) for race in races]

    async def get_past_races(self, today: date | None = None) -> list[RaceSchema]:
        """Get races that have already happened."""
        races = await self.race_repo.get_past(today or date.today())
        return [self._to_schema(race) for race in races]

    async def create_race(self, data: RaceCreate, today: date | None = None) -> RaceSchema:
        """Create a race together with its default checklist."""
        if days_until_race(data.date, today) < 0:
            raise PastRaceDateError(data.date)

        now = utcnow()
        race = RaceSchema(
            id=self.id_factory(),
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        tasks = generate_default_checklist(race, today=today, id_factory=self.id_factory)

        saved = await self.race_repo.save(race.model_dump())
        await self.task_repo.save_many([task.model_dump() for task in tasks])

        logger.info("Created race", race_id=race.id, task_count=len(tasks))
        return self._to_schema(saved)

    async def update_race(self, race_id: str, data: RaceUpdate) -> RaceSchema | None:
        """Update race attributes. Existing tasks are left as they are."""
        race = await self.race_repo.update(race_id, data.model_dump(exclude_unset=True))
        if not race:
            return None

        logger.info("Updated race", race_id=race_id)
        return self._to_schema(race)

    async def delete_race(self, race_id: str) -> bool:
        """Delete a race with its tasks and profile."""
        deleted = await self.race_repo.delete(race_id)
        if deleted:
            logger.info("Deleted race", race_id=race_id)
        return deleted

    async def duplicate_race(
        self,
        source_race_id: str,
        data: RaceDuplicate,
        today: date | None = None,
    ) -> RaceSchema | None:
        """Copy a race and its checklist onto a new date."""
        source = await self.race_repo.get(source_race_id)
        if not source:
            return None

        if days_until_race(data.date, today) < 0:
            raise PastRaceDateError(data.date)

        source_tasks = await self.task_repo.list_for_race(source_race_id)
        duplicated = duplicate_race(
            self._to_schema(source),
            [TaskSchema.model_validate(task) for task in source_tasks],
            new_name=data.name,
            new_date=data.date,
            today=today,
            id_factory=self.id_factory,
        )

        overrides = data.model_dump(exclude_unset=True, exclude={"name", "date"})
        race = duplicated.race.model_copy(update=overrides)

        saved = await self.race_repo.save(race.model_dump())
        await self.task_repo.save_many([task.model_dump() for task in duplicated.tasks])

        logger.info(
            "Duplicated race",
            source_race_id=source_race_id,
            race_id=race.id,
            task_count=len(duplicated.tasks),
        )
        return self._to_schema(saved)

    async def get_overview(self, race_id: str, today: date | None = None) -> RaceOverview | None:
        """Progress, due-now partition and milestone summary for a race."""
        race = await self.race_repo.get(race_id)
        if not race:
            return None

        tasks = [TaskSchema.model_validate(task) for task in await self.task_repo.list_for_race(race_id)]
        days_until = days_until_race(race.date, today)
        due = get_tasks_due_now(tasks, days_until)

        return RaceOverview(
            race=self._to_schema(race),
            days_until=days_until,
            current_milestone=get_current_milestone(days_until),
            progress=ProgressSchema.model_validate(calculate_progress(tasks)),
            overdue=due.overdue,
            due_now=due.due_now,
            upcoming=due.upcoming,
            milestones=[
                MilestoneSummarySchema.model_validate(summary)
                for summary in summarize_milestones(tasks, days_until)
            ],
        )

    def _to_schema(self, race: Race) -> RaceSchema:
        """Convert Race model to RaceSchema."""
        return RaceSchema.model_validate(race)
