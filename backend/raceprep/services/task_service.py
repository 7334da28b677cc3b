"""Task service."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.checklist import IdFactory, new_id, next_sort_order
from raceprep.models import Milestone, TaskStatus
from raceprep.repositories import RaceRepository, TaskRepository
from raceprep.schemas import TaskCreate, TaskSchema, TaskUpdate


class TaskService:
    """Service for editing a race's checklist."""

    def __init__(self, session: AsyncSession, id_factory: IdFactory = new_id):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.task_repo = TaskRepository(session)
        self.id_factory = id_factory

    async def get_task(self, task_id: str) -> TaskSchema | None:
        """Get a task by ID."""
        task = await self.task_repo.get(task_id)
        if not task:
            return None
        return TaskSchema.model_validate(task)

    async def get_tasks(self, race_id: str, include_hidden: bool = True) -> list[TaskSchema]:
        """Get a race's tasks in display order."""
        tasks = await self.task_repo.list_for_race(race_id, include_hidden=include_hidden)
        return [TaskSchema.model_validate(task) for task in tasks]

    async def get_tasks_for_milestone(
        self,
        race_id: str,
        milestone: Milestone,
        include_hidden: bool = False,
    ) -> list[TaskSchema]:
        """Get a race's tasks in one milestone."""
        tasks = await self.task_repo.list_for_milestone(
            race_id, Milestone(milestone).value, include_hidden=include_hidden
        )
        return [TaskSchema.model_validate(task) for task in tasks]

    async def add_task(self, race_id: str, data: TaskCreate) -> TaskSchema | None:
        """Add a user-authored task after the race's existing tasks."""
        if not await self.race_repo.get(race_id):
            return None

        existing = await self.task_repo.list_for_race(race_id)
        task = TaskSchema(
            id=self.id_factory(),
            race_id=race_id,
            sort_order=next_sort_order(existing),
            is_default=False,
            **data.model_dump(),
        )
        saved = await self.task_repo.save(task.model_dump())

        logger.info("Added task", race_id=race_id, task_id=task.id)
        return TaskSchema.model_validate(saved)

    async def update_task(self, task_id: str, data: TaskUpdate) -> TaskSchema | None:
        """Edit a task's fields."""
        task = await self.task_repo.update(task_id, data.model_dump(exclude_unset=True))
        if not task:
            return None
        return TaskSchema.model_validate(task)

    async def set_status(self, task_id: str, status: TaskStatus) -> TaskSchema | None:
        """Change a task's status."""
        task = await self.task_repo.update(task_id, {"status": TaskStatus(status).value})
        if not task:
            return None

        logger.info("Task status changed", task_id=task_id, status=task.status)
        return TaskSchema.model_validate(task)

    async def toggle_hidden(self, task_id: str) -> TaskSchema | None:
        """Hide a visible task or show a hidden one."""
        task = await self.task_repo.get(task_id)
        if not task:
            return None

        updated = await self.task_repo.update(task_id, {"is_hidden": not task.is_hidden})
        return TaskSchema.model_validate(updated)

    async def delete_task(self, task_id: str) -> bool:
        """Delete a task."""
        deleted = await self.task_repo.delete(task_id)
        if deleted:
            logger.info("Deleted task", task_id=task_id)
        return deleted
