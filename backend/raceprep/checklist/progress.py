"""Progress calculation."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from raceprep.models import TaskStatus
from raceprep.schemas import TaskSchema

COMPLETE_STATUSES = frozenset({TaskStatus.DONE.value, TaskStatus.SKIPPED.value})


@dataclass
class Progress:
    """Completion counts over visible tasks."""

    total: int
    done: int
    percentage: int


def is_complete(task: TaskSchema) -> bool:
    """DONE and SKIPPED both count as complete."""
    return TaskStatus(task.status).value in COMPLETE_STATUSES


def visible_tasks(tasks: Iterable[TaskSchema]) -> list[TaskSchema]:
    return [task for task in tasks if not task.is_hidden]


def calculate_progress(tasks: Iterable[TaskSchema]) -> Progress:
    """
    Count visible tasks and how many of them are complete.

    The percentage is rounded half up; an empty list is 0%.
    """
    visible = visible_tasks(tasks)
    total = len(visible)
    done = sum(1 for task in visible if is_complete(task))
    percentage = math.floor(done * 100 / total + 0.5) if total else 0
    return Progress(total=total, done=done, percentage=percentage)
