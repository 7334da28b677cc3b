"""Tests for race service."""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from raceprep.errors import PastRaceDateError
from raceprep.schemas import RaceCreate, RaceDuplicate, RaceUpdate
from raceprep.services import RaceService, TaskService

from tests.fixtures.factories import TODAY, create_race


class TestRaceService:
    """Tests for RaceService operations."""

    @pytest.mark.asyncio
    async def test_get_race(self, db_session, test_race):
        """Get a race by ID returns RaceSchema."""
        service = RaceService(db_session)

        response = await service.get_race(test_race.id)

        assert response is not None
        assert response.id == test_race.id
        assert response.name == "Tokyo Marathon"
        assert response.distance == "MARATHON"

    @pytest.mark.asyncio
    async def test_get_race_nonexistent(self, db_session):
        """Get non-existent race returns None."""
        service = RaceService(db_session)

        response = await service.get_race("missing")

        assert response is None

    @pytest.mark.asyncio
    async def test_get_races(self, db_session, test_race):
        """Races come back soonest first with a total."""
        db_session.add(create_race(id="later", race_date=date(2025, 9, 1)))
        await db_session.flush()
        service = RaceService(db_session)

        responses, total = await service.get_races()

        assert total == 2
        assert [r.id for r in responses] == [test_race.id, "later"]

    @pytest.mark.asyncio
    async def test_upcoming_and_past(self, db_session, test_race):
        db_session.add(create_race(id="done", race_date=TODAY - timedelta(days=1)))
        await db_session.flush()
        service = RaceService(db_session)

        upcoming = await service.get_upcoming_races(today=TODAY)
        past = await service.get_past_races(today=TODAY)

        assert [r.id for r in upcoming] == [test_race.id]
        assert [r.id for r in past] == ["done"]

    @pytest.mark.asyncio
    async def test_create_race(self, db_session, id_factory):
        """Creating a race also builds its default checklist."""
        service = RaceService(db_session, id_factory=id_factory)
        data = RaceCreate(name="  Osaka Marathon ", date=date(2025, 8, 31), is_travel_race=True)

        race = await service.create_race(data, today=TODAY)

        assert race.id == "id-1"
        assert race.name == "Osaka Marathon"
        assert race.distance == "MARATHON"
        tasks = await TaskService(db_session).get_tasks(race.id)
        assert len(tasks) == 21
        assert [t.sort_order for t in tasks] == list(range(21))
        assert all(t.is_default for t in tasks)

    @pytest.mark.asyncio
    async def test_create_race_non_travel(self, db_session):
        service = RaceService(db_session)
        data = RaceCreate(name="Park 10K", distance="10K", date=date(2025, 8, 31))

        race = await service.create_race(data, today=TODAY)

        tasks = await TaskService(db_session).get_tasks(race.id)
        assert len(tasks) == 18

    @pytest.mark.asyncio
    async def test_create_race_today_allowed(self, db_session):
        service = RaceService(db_session)

        race = await service.create_race(RaceCreate(name="Today", date=TODAY), today=TODAY)

        assert race.date == TODAY

    @pytest.mark.asyncio
    async def test_create_race_in_past_rejected(self, db_session):
        service = RaceService(db_session)
        data = RaceCreate(name="Late", date=TODAY - timedelta(days=1))

        with pytest.raises(PastRaceDateError):
            await service.create_race(data, today=TODAY)

        assert (await service.get_races())[1] == 0

    @pytest.mark.asyncio
    async def test_update_race(self, db_session, test_race, test_tasks):
        """Updating a race leaves its tasks alone."""
        service = RaceService(db_session)

        response = await service.update_race(
            test_race.id, RaceUpdate(name="Tokyo 2025", start_time="09:10")
        )

        assert response is not None
        assert response.name == "Tokyo 2025"
        assert response.start_time == "09:10"
        assert response.city == "Tokyo"
        tasks = await TaskService(db_session).get_tasks(test_race.id)
        assert len(tasks) == len(test_tasks)

    @pytest.mark.asyncio
    async def test_update_race_nonexistent(self, db_session):
        service = RaceService(db_session)

        response = await service.update_race("missing", RaceUpdate(name="Nope"))

        assert response is None

    @pytest.mark.asyncio
    async def test_delete_race(self, db_session, test_race, test_tasks):
        service = RaceService(db_session)

        deleted = await service.delete_race(test_race.id)

        assert deleted is True
        assert await service.get_race(test_race.id) is None
        assert await TaskService(db_session).get_tasks(test_race.id) == []

    @pytest.mark.asyncio
    async def test_delete_race_nonexistent(self, db_session):
        service = RaceService(db_session)

        assert await service.delete_race("missing") is False

    @pytest.mark.asyncio
    async def test_duplicate_race(self, db_session, test_race, test_tasks, id_factory):
        """Duplicate copies tasks with fresh status and provenance."""
        task_service = TaskService(db_session)
        await task_service.set_status("task-1", "DONE")
        service = RaceService(db_session, id_factory=id_factory)

        copy = await service.duplicate_race(
            test_race.id,
            RaceDuplicate(name="Tokyo Marathon 2026", date=date(2026, 3, 1), city="Tokyo"),
            today=TODAY,
        )

        assert copy is not None
        assert copy.id == "id-1"
        assert copy.created_from_race_id == test_race.id
        assert copy.is_travel_race is True
        tasks = await task_service.get_tasks(copy.id)
        assert len(tasks) == len(test_tasks)
        assert all(t.status == "NOT_STARTED" for t in tasks)
        assert [t.sort_order for t in tasks] == [0, 1, 2, 3, 4]
        assert tasks[4].is_hidden is True
        # Source is untouched
        source_tasks = await task_service.get_tasks(test_race.id)
        assert source_tasks[0].status == "DONE"

    @pytest.mark.asyncio
    async def test_duplicate_race_overrides(self, db_session, test_race):
        service = RaceService(db_session)

        copy = await service.duplicate_race(
            test_race.id,
            RaceDuplicate(name="Home Half", date=date(2025, 10, 5), distance="HALF", is_travel_race=False),
            today=TODAY,
        )

        assert copy.distance == "HALF"
        assert copy.is_travel_race is False
        assert copy.city == "Tokyo"

    @pytest.mark.asyncio
    async def test_duplicate_race_nonexistent(self, db_session):
        service = RaceService(db_session)

        copy = await service.duplicate_race(
            "missing", RaceDuplicate(name="X", date=date(2026, 1, 1)), today=TODAY
        )

        assert copy is None

    @pytest.mark.asyncio
    async def test_duplicate_race_in_past_rejected(self, db_session, test_race):
        service = RaceService(db_session)

        with pytest.raises(PastRaceDateError):
            await service.duplicate_race(
                test_race.id, RaceDuplicate(name="X", date=date(2024, 1, 1)), today=TODAY
            )

    @pytest.mark.asyncio
    async def test_get_overview(self, db_session, test_race, test_tasks):
        """Overview for a race 29 days away."""
        await TaskService(db_session).set_status("task-2", "DONE")
        service = RaceService(db_session)

        overview = await service.get_overview(test_race.id, today=TODAY)

        assert overview is not None
        assert overview.days_until == 29
        assert overview.current_milestone == "D_7"
        assert overview.progress.total == 4
        assert overview.progress.done == 1
        assert overview.progress.percentage == 25
        assert [t.id for t in overview.overdue] == ["task-1"]
        assert [t.id for t in overview.due_now] == ["task-3"]
        assert [t.id for t in overview.upcoming] == ["task-4"]
        statuses = {m.milestone: m.status for m in overview.milestones}
        assert statuses == {
            "ASAP_6MO": "empty",
            "MO_3": "overdue",
            "MO_1": "complete",
            "D_7": "current",
            "D_1": "upcoming",
            "RACE_MORNING": "empty",
        }

    @pytest.mark.asyncio
    async def test_get_overview_nonexistent(self, db_session):
        service = RaceService(db_session)

        assert await service.get_overview("missing", today=TODAY) is None

    @pytest.mark.asyncio
    async def test_update_race_rejects_null_required_fields(self, db_session, test_race):
        """Required columns cannot be cleared; the stored race is unchanged."""
        with pytest.raises(ValidationError):
            RaceUpdate(name=None, date=None)
        with pytest.raises(ValidationError):
            RaceUpdate(is_travel_race=None)

        response = await RaceService(db_session).get_race(test_race.id)
        assert response.name == "Tokyo Marathon"
        assert response.date == date(2025, 3, 2)

    @pytest.mark.asyncio
    async def test_update_race_clears_optional_fields(self, db_session, test_race):
        service = RaceService(db_session)

        response = await service.update_race(test_race.id, RaceUpdate(city=None, country=None))

        assert response.city is None
        assert response.country is None
        assert response.name == "Tokyo Marathon"

    def test_duplicate_rejects_null_overrides(self):
        with pytest.raises(ValidationError):
            RaceDuplicate(name="Copy", date=date(2026, 1, 1), distance=None)
