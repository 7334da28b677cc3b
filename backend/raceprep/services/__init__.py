"""Business logic services."""

from raceprep.services.data_service import DataService
from raceprep.services.profile_service import ProfileService
from raceprep.services.race_service import RaceService
from raceprep.services.task_service import TaskService

__all__ = [
    "RaceService",
    "TaskService",
    "ProfileService",
    "DataService",
]
