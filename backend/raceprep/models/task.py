"""Checklist task model."""

import enum

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from raceprep.database import Base
from raceprep.models.base import TimestampMixin


class Milestone(str, enum.Enum):
    """Time bucket relative to race day, earliest first."""

    ASAP_6MO = "ASAP_6MO"
    MO_3 = "MO_3"
    MO_1 = "MO_1"
    D_7 = "D_7"
    D_1 = "D_1"
    RACE_MORNING = "RACE_MORNING"


class TaskCategory(str, enum.Enum):
    """Task category enum."""

    TRAVEL = "Travel"
    GEAR_AND_CLOTHING = "Gear & Clothing"
    ADMIN_AND_RULES = "Admin & Rules"
    NUTRITION_AND_STRATEGY = "Nutrition & Strategy"
    PERSONAL_AND_MISC = "Personal & Misc"


class TaskStatus(str, enum.Enum):
    """Task status enum."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    SKIPPED = "SKIPPED"


class Task(Base, TimestampMixin):
    """Checklist task table model."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    race_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("races.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(30), nullable=False)
    milestone: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.NOT_STARTED.value
    )
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    race = relationship("Race", back_populates="tasks")

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, race_id={self.race_id}, title='{self.title}')>"
