"""Race model."""

import enum
import datetime

from sqlalchemy import Boolean, Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from raceprep.database import Base
from raceprep.models.base import TimestampMixin


class RaceDistance(str, enum.Enum):
    """Race distance enum."""

    TEN_K = "10K"
    HALF = "HALF"
    MARATHON = "MARATHON"


DISTANCE_LABELS: dict[RaceDistance, str] = {
    RaceDistance.TEN_K: "10K",
    RaceDistance.HALF: "Half Marathon",
    RaceDistance.MARATHON: "Marathon",
}


class Race(Base, TimestampMixin):
    """Race table model."""

    __tablename__ = "races"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    distance: Mapped[str] = mapped_column(String(10), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[str | None] = mapped_column(String(5), nullable=True)  # HH:MM
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_travel_race: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Provenance only; the source race may be deleted later
    created_from_race_id: Mapped[str | None] = mapped_column(String(36), nullable=True)

    # Relationships
    tasks = relationship("Task", back_populates="race", cascade="all, delete-orphan")
    profile = relationship(
        "PersonalizationProfile",
        back_populates="race",
        cascade="all, delete-orphan",
        uselist=False,
    )

    def __repr__(self) -> str:
        return f"<Race(id={self.id}, name='{self.name}', date={self.date})>"
