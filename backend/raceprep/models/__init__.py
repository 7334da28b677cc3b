"""SQLAlchemy models."""

from raceprep.models.profile import PersonalizationProfile
from raceprep.models.race import DISTANCE_LABELS, Race, RaceDistance
from raceprep.models.settings import AppSettings
from raceprep.models.task import Milestone, Task, TaskCategory, TaskStatus

__all__ = [
    "Race",
    "Task",
    "PersonalizationProfile",
    "AppSettings",
    "RaceDistance",
    "Milestone",
    "TaskCategory",
    "TaskStatus",
    "DISTANCE_LABELS",
]
