"""Personalization profile schemas."""

from raceprep.schemas.common import BaseSchema

PROFILE_FLAGS = (
    "international_travel",
    "stays_in_hotel",
    "heat_sensitive",
    "uses_gels",
    "uses_hydration_pack",
    "uses_headphones",
    "has_dependents",
)


class ProfileSchema(BaseSchema):
    """Personalization flags for one race."""

    race_id: str
    international_travel: bool = False
    stays_in_hotel: bool = False
    heat_sensitive: bool = False
    uses_gels: bool = False
    uses_hydration_pack: bool = False
    uses_headphones: bool = False
    has_dependents: bool = False


class ProfileUpdate(BaseSchema):
    """Flags to change; unset flags keep their current value."""

    international_travel: bool | None = None
    stays_in_hotel: bool | None = None
    heat_sensitive: bool | None = None
    uses_gels: bool | None = None
    uses_hydration_pack: bool | None = None
    uses_headphones: bool | None = None
    has_dependents: bool | None = None
