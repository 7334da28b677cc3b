"""Data access repositories."""

from raceprep.repositories.base import BaseRepository
from raceprep.repositories.profile_repository import ProfileRepository
from raceprep.repositories.race_repository import RaceRepository
from raceprep.repositories.settings_repository import SettingsRepository
from raceprep.repositories.task_repository import TaskRepository

__all__ = [
    "BaseRepository",
    "RaceRepository",
    "TaskRepository",
    "ProfileRepository",
    "SettingsRepository",
]
