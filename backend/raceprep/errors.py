"""Error types raised by the checklist engine and services."""


class RacePrepError(Exception):
    """Base class for race-prep errors."""


class InvalidRaceDateError(RacePrepError, ValueError):
    """Raised when a race date cannot be parsed as a calendar date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid race date: {value!r}")


class UnknownMilestoneError(RacePrepError, ValueError):
    """Raised when a milestone outside the fixed set is encountered."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown milestone: {value!r}")


class PastRaceDateError(RacePrepError, ValueError):
    """Raised when a new race is scheduled before today."""

    def __init__(self, race_date: object):
        self.race_date = race_date
        super().__init__(f"Race date cannot be in the past: {race_date}")


class InvalidBackupError(RacePrepError):
    """Raised when a backup payload is unreadable or incomplete."""
