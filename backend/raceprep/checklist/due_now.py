"""Due-now partitioning and per-milestone summaries."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from raceprep.checklist.milestones import (
    MILESTONE_LABELS,
    MILESTONE_ORDER,
    get_current_milestone,
    milestone_index,
)
from raceprep.checklist.progress import is_complete, visible_tasks
from raceprep.models import Milestone
from raceprep.schemas import TaskSchema


@dataclass
class DueNow:
    """Open tasks split around the current milestone."""

    overdue: list[TaskSchema] = field(default_factory=list)
    due_now: list[TaskSchema] = field(default_factory=list)
    upcoming: list[TaskSchema] = field(default_factory=list)


@dataclass
class MilestoneSummary:
    """Visible task counts for one milestone."""

    milestone: Milestone
    label: str
    total: int
    done: int
    status: str


def get_tasks_due_now(tasks: Iterable[TaskSchema], days_until: int) -> DueNow:
    """
    Partition visible, unfinished tasks relative to the current milestone.

    Tasks in an earlier milestone are overdue, tasks in the current one are
    due now and later ones are upcoming. Input order is kept in each bucket.
    """
    current_index = milestone_index(get_current_milestone(days_until))
    result = DueNow()

    for task in visible_tasks(tasks):
        if is_complete(task):
            continue
        index = milestone_index(task.milestone)
        if index < current_index:
            result.overdue.append(task)
        elif index == current_index:
            result.due_now.append(task)
        else:
            result.upcoming.append(task)

    return result


def summarize_milestones(tasks: Iterable[TaskSchema], days_until: int) -> list[MilestoneSummary]:
    """Counts and status (empty/complete/overdue/current/upcoming) per milestone."""
    visible = visible_tasks(tasks)
    current_index = milestone_index(get_current_milestone(days_until))
    summaries = []

    for index, milestone in enumerate(MILESTONE_ORDER):
        in_milestone = [task for task in visible if milestone_index(task.milestone) == index]
        total = len(in_milestone)
        done = sum(1 for task in in_milestone if is_complete(task))

        if total == 0:
            status = "empty"
        elif done == total:
            status = "complete"
        elif index < current_index:
            status = "overdue"
        elif index == current_index:
            status = "current"
        else:
            status = "upcoming"

        summaries.append(
            MilestoneSummary(
                milestone=milestone,
                label=MILESTONE_LABELS[milestone],
                total=total,
                done=done,
                status=status,
            )
        )

    return summaries
