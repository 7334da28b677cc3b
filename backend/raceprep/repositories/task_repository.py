"""Task repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.models import Task
from raceprep.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Repository for Task model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Task, session)

    async def list_for_race(self, race_id: str, include_hidden: bool = True) -> list[Task]:
        """Get a race's tasks ordered by sort_order."""
        query = select(Task).where(Task.race_id == race_id)
        if not include_hidden:
            query = query.where(Task.is_hidden.is_(False))
        query = query.order_by(Task.sort_order, Task.created_at)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_for_milestone(
        self, race_id: str, milestone: str, include_hidden: bool = False
    ) -> list[Task]:
        """Get a race's tasks in one milestone."""
        query = select(Task).where(Task.race_id == race_id, Task.milestone == milestone)
        if not include_hidden:
            query = query.where(Task.is_hidden.is_(False))
        query = query.order_by(Task.sort_order, Task.created_at)
        result = await self.session.execute(query)
        return list(result.scalars().all())
