"""Checklist engine: pure functions over races, tasks and profiles."""

from raceprep.checklist.catalog import (
    DEFAULT_TASKS,
    PERSONALIZATION_RULES,
    Eligibility,
    PersonalizationRule,
    TaskTemplate,
    is_eligible,
)
from raceprep.checklist.due_now import (
    DueNow,
    MilestoneSummary,
    get_tasks_due_now,
    summarize_milestones,
)
from raceprep.checklist.duplication import DuplicatedRace, duplicate_race
from raceprep.checklist.generator import build_task, generate_default_checklist, next_sort_order
from raceprep.checklist.identity import IdFactory, new_id
from raceprep.checklist.milestones import (
    MILESTONE_DAYS_BEFORE,
    MILESTONE_LABELS,
    MILESTONE_ORDER,
    days_until_race,
    get_adjusted_milestone,
    get_current_milestone,
    milestone_index,
    milestone_threshold,
    parse_race_date,
)
from raceprep.checklist.personalization import apply_personalization, default_profile
from raceprep.checklist.progress import Progress, calculate_progress, is_complete

__all__ = [
    # Catalog
    "DEFAULT_TASKS",
    "PERSONALIZATION_RULES",
    "Eligibility",
    "PersonalizationRule",
    "TaskTemplate",
    "is_eligible",
    # Milestones
    "MILESTONE_ORDER",
    "MILESTONE_DAYS_BEFORE",
    "MILESTONE_LABELS",
    "days_until_race",
    "get_adjusted_milestone",
    "get_current_milestone",
    "milestone_index",
    "milestone_threshold",
    "parse_race_date",
    # Generation
    "IdFactory",
    "new_id",
    "build_task",
    "generate_default_checklist",
    "next_sort_order",
    # Personalization
    "apply_personalization",
    "default_profile",
    # Due now / progress
    "DueNow",
    "MilestoneSummary",
    "get_tasks_due_now",
    "summarize_milestones",
    "Progress",
    "calculate_progress",
    "is_complete",
    # Duplication
    "DuplicatedRace",
    "duplicate_race",
]
