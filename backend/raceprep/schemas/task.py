"""Checklist task schemas."""

from pydantic import Field

from raceprep.models import Milestone, TaskCategory, TaskStatus
from raceprep.schemas.common import BaseSchema, PartialSchema


class TaskBase(BaseSchema):
    """Base task schema."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    category: TaskCategory = TaskCategory.PERSONAL_AND_MISC
    milestone: Milestone


class TaskCreate(TaskBase):
    """Schema for a user-authored task."""

    pass


class TaskUpdate(PartialSchema):
    """Schema for editing a task."""

    required_fields = ("title", "category", "milestone", "status", "is_hidden")

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category: TaskCategory | None = None
    milestone: Milestone | None = None
    status: TaskStatus | None = None
    is_hidden: bool | None = None


class TaskSchema(TaskBase):
    """Stored task."""

    id: str
    race_id: str
    status: TaskStatus = TaskStatus.NOT_STARTED
    sort_order: int = 0
    is_default: bool = False
    is_hidden: bool = False
