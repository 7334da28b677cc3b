"""Race duplication."""

from dataclasses import dataclass
from datetime import date, datetime, timezone

from raceprep.checklist.identity import IdFactory, new_id
from raceprep.checklist.milestones import days_until_race, get_adjusted_milestone, parse_race_date
from raceprep.models import TaskStatus
from raceprep.schemas import RaceSchema, TaskSchema


@dataclass
class DuplicatedRace:
    """A copied race and its copied tasks."""

    race: RaceSchema
    tasks: list[TaskSchema]


def duplicate_race(
    source_race: RaceSchema,
    source_tasks: list[TaskSchema],
    new_name: str,
    new_date: date | str,
    today: date | None = None,
    id_factory: IdFactory = new_id,
    now: datetime | None = None,
) -> DuplicatedRace:
    """
    Copy a race and its checklist onto a new date.

    Every copied task starts over as NOT_STARTED, takes its position in
    ``source_tasks`` as sort_order, and has its milestone rolled forward
    against the new race date.
    """
    race_date = parse_race_date(new_date)
    days_until = days_until_race(race_date, today)
    if now is None:
        now = datetime.now(timezone.utc)

    race = source_race.model_copy(
        update={
            "id": id_factory(),
            "name": new_name,
            "date": race_date,
            "created_from_race_id": source_race.id,
            "created_at": now,
            "updated_at": now,
        }
    )

    tasks = [
        task.model_copy(
            update={
                "id": id_factory(),
                "race_id": race.id,
                "milestone": get_adjusted_milestone(task.milestone, days_until).value,
                "status": TaskStatus.NOT_STARTED.value,
                "sort_order": index,
            }
        )
        for index, task in enumerate(source_tasks)
    ]

    return DuplicatedRace(race=race, tasks=tasks)
