"""Personalization profile model."""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from raceprep.database import Base
from raceprep.models.base import TimestampMixin


class PersonalizationProfile(Base, TimestampMixin):
    """One profile per race, keyed by race id."""

    __tablename__ = "personalization_profiles"

    race_id: Mapped[str] = mapped_column(String(36), ForeignKey("races.id"), primary_key=True)

    international_travel: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    stays_in_hotel: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    heat_sensitive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    uses_gels: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    uses_hydration_pack: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    uses_headphones: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    has_dependents: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    race = relationship("Race", back_populates="profile")

    def __repr__(self) -> str:
        return f"<PersonalizationProfile(race_id={self.race_id})>"
