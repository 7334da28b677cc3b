"""Personalization profile repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.models import PersonalizationProfile
from raceprep.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[PersonalizationProfile]):
    """Repository for PersonalizationProfile model, keyed by race id."""

    def __init__(self, session: AsyncSession):
        super().__init__(PersonalizationProfile, session)

    async def get_by_race(self, race_id: str) -> PersonalizationProfile | None:
        """Get the profile stored for a race."""
        return await self.get(race_id)
