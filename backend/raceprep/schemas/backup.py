"""Backup export/import schemas."""

from datetime import datetime

from pydantic import Field

from raceprep.schemas.common import BaseSchema
from raceprep.schemas.profile import ProfileSchema
from raceprep.schemas.race import RaceSchema
from raceprep.schemas.task import TaskSchema


class AppSettingsSchema(BaseSchema):
    """User preferences."""

    notifications_enabled: bool = False


class BackupBundle(BaseSchema):
    """Full data export."""

    races: list[RaceSchema] = Field(default_factory=list)
    tasks: list[TaskSchema] = Field(default_factory=list)
    profiles: list[ProfileSchema] = Field(default_factory=list)
    settings: AppSettingsSchema = Field(default_factory=AppSettingsSchema)
    exported_at: datetime


class ImportBundle(BaseSchema):
    """Import payload; only the collections present are replaced."""

    races: list[RaceSchema] | None = None
    tasks: list[TaskSchema] | None = None
    profiles: list[ProfileSchema] | None = None
    settings: AppSettingsSchema | None = None
    exported_at: datetime | None = None
