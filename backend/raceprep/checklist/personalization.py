"""Personalization profile reconciliation.

Each profile flag switches a fixed set of catalog templates on or off for a
race. Tasks are matched to templates by exact title. Switching a flag off
hides its tasks instead of deleting them, so status and edits survive a
later re-enable. A task the user has renamed no longer matches its
template and is left alone.
"""

from datetime import date

from loguru import logger

from raceprep.checklist.catalog import PERSONALIZATION_RULES
from raceprep.checklist.generator import build_task
from raceprep.checklist.identity import IdFactory, new_id
from raceprep.checklist.milestones import days_until_race
from raceprep.models import RaceDistance
from raceprep.schemas import ProfileSchema, RaceSchema, TaskSchema


def default_profile(race: RaceSchema) -> ProfileSchema:
    """Profile inferred from race attributes before the user edits it."""
    return ProfileSchema(
        race_id=race.id,
        international_travel=race.is_travel_race,
        stays_in_hotel=race.is_travel_race,
        heat_sensitive=False,
        uses_gels=race.distance != RaceDistance.TEN_K,
        uses_hydration_pack=False,
        uses_headphones=False,
        has_dependents=False,
    )


def _find_by_title(tasks: list[TaskSchema], title: str) -> int | None:
    for index, task in enumerate(tasks):
        if task.title == title:
            return index
    return None


def apply_personalization(
    existing_tasks: list[TaskSchema],
    race: RaceSchema,
    profile: ProfileSchema,
    today: date | None = None,
    id_factory: IdFactory = new_id,
) -> list[TaskSchema]:
    """
    Reconcile a race's tasks with its personalization profile.

    Args:
        existing_tasks: Current tasks of the race; not modified
        race: Race the tasks belong to
        profile: Flags to apply
        today: Override for the current date
        id_factory: Identifier generator for new tasks

    Returns:
        The existing tasks in their original order (copies where the hidden
        flag changed) followed by newly created personalization tasks
    """
    days_until = days_until_race(race.date, today)
    merged = list(existing_tasks)
    added: list[TaskSchema] = []
    sort_order = max([0, *(task.sort_order for task in existing_tasks)])

    for rule in PERSONALIZATION_RULES:
        enabled = bool(getattr(profile, rule.flag))

        for template in rule.templates:
            index = _find_by_title(merged, template.title)

            if index is None:
                if enabled:
                    sort_order += 1
                    added.append(
                        build_task(
                            template,
                            race_id=race.id,
                            days_until=days_until,
                            sort_order=sort_order,
                            is_default=False,
                            id_factory=id_factory,
                        )
                    )
                    logger.debug("Adding personalization task", flag=rule.flag, race_id=race.id)
                continue

            task = merged[index]
            hidden = not enabled
            if task.is_hidden != hidden:
                merged[index] = task.model_copy(update={"is_hidden": hidden})
                logger.debug(
                    "Changing personalization task visibility",
                    flag=rule.flag,
                    task_id=task.id,
                    hidden=hidden,
                )

    return merged + added
