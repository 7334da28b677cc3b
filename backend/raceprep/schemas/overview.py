"""Race overview schemas."""

from pydantic import Field

from raceprep.models import Milestone
from raceprep.schemas.common import BaseSchema
from raceprep.schemas.race import RaceSchema
from raceprep.schemas.task import TaskSchema


class ProgressSchema(BaseSchema):
    """Completion counts over visible tasks."""

    total: int
    done: int
    percentage: int = Field(..., ge=0, le=100)


class MilestoneSummarySchema(BaseSchema):
    """Per-milestone task counts and status."""

    milestone: Milestone
    label: str
    total: int
    done: int
    status: str  # empty/complete/overdue/current/upcoming


class RaceOverview(BaseSchema):
    """Everything needed to render a race's dashboard."""

    race: RaceSchema
    days_until: int
    current_milestone: Milestone
    progress: ProgressSchema
    overdue: list[TaskSchema] = Field(default_factory=list)
    due_now: list[TaskSchema] = Field(default_factory=list)
    upcoming: list[TaskSchema] = Field(default_factory=list)
    milestones: list[MilestoneSummarySchema] = Field(default_factory=list)
