"""Default checklist generation."""

from collections.abc import Iterable
from datetime import date

from raceprep.checklist.catalog import DEFAULT_TASKS, TaskTemplate, is_eligible
from raceprep.checklist.identity import IdFactory, new_id
from raceprep.checklist.milestones import days_until_race, get_adjusted_milestone
from raceprep.models import TaskStatus
from raceprep.schemas import RaceSchema, TaskSchema


def build_task(
    template: TaskTemplate,
    race_id: str,
    days_until: int,
    sort_order: int,
    is_default: bool,
    id_factory: IdFactory = new_id,
) -> TaskSchema:
    """Instantiate a template for a race, rolling its milestone forward if needed."""
    return TaskSchema(
        id=id_factory(),
        race_id=race_id,
        title=template.title,
        description=template.description,
        category=template.category,
        milestone=get_adjusted_milestone(template.milestone, days_until),
        status=TaskStatus.NOT_STARTED,
        sort_order=sort_order,
        is_default=is_default,
        is_hidden=False,
    )


def next_sort_order(tasks: Iterable[TaskSchema]) -> int:
    """Sort order that places a new task after every existing one."""
    return max([0, *(task.sort_order for task in tasks)]) + 1


def generate_default_checklist(
    race: RaceSchema,
    today: date | None = None,
    id_factory: IdFactory = new_id,
) -> list[TaskSchema]:
    """
    Build the initial task list for a new race.

    Args:
        race: Race the checklist belongs to
        today: Override for the current date
        id_factory: Identifier generator for new tasks

    Returns:
        Default tasks in catalog order, sort_order counting up from 0
    """
    days_until = days_until_race(race.date, today)
    tasks: list[TaskSchema] = []

    for template in DEFAULT_TASKS:
        if not is_eligible(template, race):
            continue
        tasks.append(
            build_task(
                template,
                race_id=race.id,
                days_until=days_until,
                sort_order=len(tasks),
                is_default=True,
                id_factory=id_factory,
            )
        )

    return tasks
