"""Pydantic schemas."""

from raceprep.schemas.backup import AppSettingsSchema, BackupBundle, ImportBundle
from raceprep.schemas.common import BaseSchema, TimestampSchema
from raceprep.schemas.overview import (
    MilestoneSummarySchema,
    ProgressSchema,
    RaceOverview,
)
from raceprep.schemas.profile import PROFILE_FLAGS, ProfileSchema, ProfileUpdate
from raceprep.schemas.race import (
    RaceCreate,
    RaceDuplicate,
    RaceListResponse,
    RaceSchema,
    RaceUpdate,
)
from raceprep.schemas.task import TaskCreate, TaskSchema, TaskUpdate

__all__ = [
    # Common
    "BaseSchema",
    "TimestampSchema",
    # Race
    "RaceCreate",
    "RaceUpdate",
    "RaceDuplicate",
    "RaceSchema",
    "RaceListResponse",
    # Task
    "TaskCreate",
    "TaskUpdate",
    "TaskSchema",
    # Profile
    "PROFILE_FLAGS",
    "ProfileSchema",
    "ProfileUpdate",
    # Overview
    "ProgressSchema",
    "MilestoneSummarySchema",
    "RaceOverview",
    # Backup
    "AppSettingsSchema",
    "BackupBundle",
    "ImportBundle",
]
