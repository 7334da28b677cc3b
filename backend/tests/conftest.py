"""Shared test fixtures."""

import itertools
import sys
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from raceprep.database import Base
from raceprep.models import Race, RaceDistance, Task

from tests.fixtures.factories import TODAY, create_race, create_task


@pytest.fixture
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def today() -> date:
    """Fixed current date for clock-dependent logic."""
    return TODAY


@pytest.fixture
def id_factory():
    """Deterministic identifier generator: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
async def test_race(db_session: AsyncSession) -> Race:
    """Create a sample race for testing."""
    race = create_race(
        id="race-1",
        name="Tokyo Marathon",
        race_date=date(2025, 3, 2),
        distance=RaceDistance.MARATHON.value,
        city="Tokyo",
        country="JP",
        is_travel_race=True,
    )
    db_session.add(race)
    await db_session.flush()
    return race


@pytest.fixture
async def test_tasks(db_session: AsyncSession, test_race: Race) -> list[Task]:
    """Create a handful of tasks across milestones for the sample race."""
    tasks = [
        create_task(id="task-1", race_id=test_race.id, title="Book flights", milestone="MO_3", sort_order=0),
        create_task(id="task-2", race_id=test_race.id, title="Confirm bookings", milestone="MO_1", sort_order=1),
        create_task(id="task-3", race_id=test_race.id, title="Check forecast", milestone="D_7", sort_order=2),
        create_task(id="task-4", race_id=test_race.id, title="Lay out kit", milestone="D_1", sort_order=3),
        create_task(
            id="task-5",
            race_id=test_race.id,
            title="Old idea",
            milestone="D_7",
            sort_order=4,
            is_hidden=True,
        ),
    ]
    db_session.add_all(tasks)
    await db_session.flush()
    return tasks
