"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from raceprep.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository class with CRUD operations."""

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def get(self, id: str) -> ModelType | None:
        """Get a record by ID."""
        return await self.session.get(self.model, id)

    async def get_all(
        self,
        skip: int = 0,
        limit: int | None = None,
        filters: dict[str, Any] | None = None,
    ) -> list[ModelType]:
        """Get all records with optional pagination and filters."""
        query = select(self.model)

        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key) and value is not None:
                    query = query.where(getattr(self.model, key) == value)

        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        """Count records with optional filters."""
        query = select(func.count()).select_from(self.model)

        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key) and value is not None:
                    query = query.where(getattr(self.model, key) == value)

        result = await self.session.execute(query)
        return result.scalar_one()

    async def save(self, data: dict[str, Any]) -> ModelType:
        """Insert or update a record by primary key."""
        instance = await self.session.merge(self.model(**data))
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def save_many(self, rows: list[dict[str, Any]]) -> list[ModelType]:
        """Insert or update several records by primary key."""
        instances = [await self.session.merge(self.model(**data)) for data in rows]
        await self.session.flush()
        return instances

    async def update(self, id: str, data: dict[str, Any]) -> ModelType | None:
        """Update a record by ID."""
        instance = await self.get(id)
        if instance is None:
            return None

        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: str) -> bool:
        """Delete a record by ID."""
        instance = await self.get(id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True

    async def replace_all(self, rows: list[dict[str, Any]]) -> int:
        """Drop every stored record and insert the given ones."""
        await self.session.execute(
            delete(self.model).execution_options(synchronize_session=False)
        )
        self.session.expunge_all()
        self.session.add_all(self.model(**data) for data in rows)
        await self.session.flush()
        return len(rows)
