"""Tests for task repository."""

import pytest

from raceprep.repositories import TaskRepository

from tests.fixtures.factories import create_task


class TestTaskRepository:
    """Tests for TaskRepository."""

    @pytest.mark.asyncio
    async def test_list_for_race(self, db_session, test_race, test_tasks):
        """All tasks, hidden included, in sort order."""
        repo = TaskRepository(db_session)

        result = await repo.list_for_race(test_race.id)

        assert [task.id for task in result] == ["task-1", "task-2", "task-3", "task-4", "task-5"]

    @pytest.mark.asyncio
    async def test_list_for_race_without_hidden(self, db_session, test_race, test_tasks):
        repo = TaskRepository(db_session)

        result = await repo.list_for_race(test_race.id, include_hidden=False)

        assert "task-5" not in [task.id for task in result]
        assert len(result) == 4

    @pytest.mark.asyncio
    async def test_list_for_race_sorted_by_sort_order(self, db_session, test_race):
        repo = TaskRepository(db_session)
        db_session.add_all([
            create_task(race_id=test_race.id, id="c", sort_order=9),
            create_task(race_id=test_race.id, id="a", sort_order=1),
            create_task(race_id=test_race.id, id="b", sort_order=4),
        ])
        await db_session.flush()

        result = await repo.list_for_race(test_race.id)

        assert [task.id for task in result] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_list_for_unknown_race(self, db_session, test_tasks):
        repo = TaskRepository(db_session)

        result = await repo.list_for_race("missing")

        assert result == []

    @pytest.mark.asyncio
    async def test_list_for_milestone(self, db_session, test_race, test_tasks):
        """Hidden tasks are excluded by default."""
        repo = TaskRepository(db_session)

        result = await repo.list_for_milestone(test_race.id, "D_7")

        assert [task.id for task in result] == ["task-3"]

    @pytest.mark.asyncio
    async def test_list_for_milestone_with_hidden(self, db_session, test_race, test_tasks):
        repo = TaskRepository(db_session)

        result = await repo.list_for_milestone(test_race.id, "D_7", include_hidden=True)

        assert [task.id for task in result] == ["task-3", "task-5"]
