"""Race repository."""

from datetime import date
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.models import Race
from raceprep.models.base import utcnow
from raceprep.repositories.base import BaseRepository


class RaceRepository(BaseRepository[Race]):
    """Repository for Race model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Race, session)

    async def save(self, data: dict[str, Any]) -> Race:
        """Upsert a race, stamping updated_at when it already exists."""
        if data.get("id") and await self.get(data["id"]) is not None:
            data = {**data, "updated_at": utcnow()}
        return await super().save(data)

    async def get_ordered_by_date(self, skip: int = 0, limit: int | None = None) -> list[Race]:
        """Get races, soonest first."""
        query = select(Race).order_by(Race.date, Race.created_at).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_upcoming(self, today: date) -> list[Race]:
        """Get races on or after today."""
        query = select(Race).where(Race.date >= today).order_by(Race.date)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_past(self, today: date) -> list[Race]:
        """Get races before today, most recent first."""
        query = select(Race).where(Race.date < today).order_by(Race.date.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())
