"""Tests for race repository."""

from datetime import date, timedelta

import pytest

from raceprep.repositories import RaceRepository, TaskRepository

from tests.fixtures.factories import TODAY, create_race, create_task


@pytest.fixture
async def races(db_session):
    """Races before, on and after today."""
    items = [
        create_race(id="past-old", name="Old", race_date=TODAY - timedelta(days=60)),
        create_race(id="future-far", name="Far", race_date=TODAY + timedelta(days=120)),
        create_race(id="today", name="Today", race_date=TODAY),
        create_race(id="past-recent", name="Recent", race_date=TODAY - timedelta(days=5)),
        create_race(id="future-near", name="Near", race_date=TODAY + timedelta(days=10)),
    ]
    db_session.add_all(items)
    await db_session.flush()
    return items


class TestRaceRepository:
    """Tests for RaceRepository."""

    @pytest.mark.asyncio
    async def test_get_ordered_by_date(self, db_session, races):
        repo = RaceRepository(db_session)

        result = await repo.get_ordered_by_date()

        assert [race.id for race in result] == [
            "past-old",
            "past-recent",
            "today",
            "future-near",
            "future-far",
        ]

    @pytest.mark.asyncio
    async def test_get_ordered_by_date_paginated(self, db_session, races):
        repo = RaceRepository(db_session)

        result = await repo.get_ordered_by_date(skip=1, limit=2)

        assert [race.id for race in result] == ["past-recent", "today"]

    @pytest.mark.asyncio
    async def test_get_upcoming(self, db_session, races):
        """Race day itself counts as upcoming."""
        repo = RaceRepository(db_session)

        result = await repo.get_upcoming(TODAY)

        assert [race.id for race in result] == ["today", "future-near", "future-far"]

    @pytest.mark.asyncio
    async def test_get_past(self, db_session, races):
        """Past races come most recent first."""
        repo = RaceRepository(db_session)

        result = await repo.get_past(TODAY)

        assert [race.id for race in result] == ["past-recent", "past-old"]

    @pytest.mark.asyncio
    async def test_save_new_race(self, db_session):
        repo = RaceRepository(db_session)

        race = await repo.save({
            "id": "r1",
            "name": "City 10K",
            "distance": "10K",
            "date": date(2025, 5, 4),
            "is_travel_race": False,
        })

        assert race.id == "r1"
        assert race.distance == "10K"
        assert race.created_at is not None

    @pytest.mark.asyncio
    async def test_save_existing_race_keeps_single_row(self, db_session, test_race):
        repo = RaceRepository(db_session)

        race = await repo.save({
            "id": test_race.id,
            "name": "Renamed",
            "distance": test_race.distance,
            "date": test_race.date,
            "is_travel_race": test_race.is_travel_race,
        })

        assert race.name == "Renamed"
        assert race.updated_at is not None
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_delete_cascades_to_tasks(self, db_session, test_race, test_tasks):
        """Deleting a race removes its tasks."""
        repo = RaceRepository(db_session)
        task_repo = TaskRepository(db_session)

        await repo.delete(test_race.id)

        assert await task_repo.list_for_race(test_race.id) == []
        assert await task_repo.count() == 0

    @pytest.mark.asyncio
    async def test_delete_leaves_other_races_tasks(self, db_session, test_race, test_tasks):
        other = create_race(id="other")
        db_session.add(other)
        db_session.add(create_task(race_id="other", id="other-task"))
        await db_session.flush()

        await RaceRepository(db_session).delete(test_race.id)

        remaining = await TaskRepository(db_session).get_all()
        assert [task.id for task in remaining] == ["other-task"]
