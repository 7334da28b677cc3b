"""Milestone calendar.

Milestones are ordered earliest-to-latest relative to race day, each with a
fixed "days before race" threshold. Thresholds strictly decrease along the
order, which is what makes the forward scans below terminate at
``RACE_MORNING``.
"""

from datetime import date

from raceprep.errors import InvalidRaceDateError, UnknownMilestoneError
from raceprep.models import Milestone

MILESTONE_ORDER: tuple[Milestone, ...] = (
    Milestone.ASAP_6MO,
    Milestone.MO_3,
    Milestone.MO_1,
    Milestone.D_7,
    Milestone.D_1,
    Milestone.RACE_MORNING,
)

MILESTONE_DAYS_BEFORE: dict[Milestone, int] = {
    Milestone.ASAP_6MO: 180,
    Milestone.MO_3: 90,
    Milestone.MO_1: 30,
    Milestone.D_7: 7,
    Milestone.D_1: 1,
    Milestone.RACE_MORNING: 0,
}

MILESTONE_LABELS: dict[Milestone, str] = {
    Milestone.ASAP_6MO: "ASAP / 6 months",
    Milestone.MO_3: "3 months out",
    Milestone.MO_1: "1 month out",
    Milestone.D_7: "7 days out",
    Milestone.D_1: "Day before",
    Milestone.RACE_MORNING: "Race morning",
}


def _as_milestone(value: Milestone | str) -> Milestone:
    try:
        return Milestone(value)
    except ValueError as exc:
        raise UnknownMilestoneError(value) from exc


def milestone_threshold(milestone: Milestone | str) -> int:
    """Days-before-race at which the milestone's window opens."""
    return MILESTONE_DAYS_BEFORE[_as_milestone(milestone)]


def milestone_index(milestone: Milestone | str) -> int:
    """Position of the milestone in MILESTONE_ORDER."""
    return MILESTONE_ORDER.index(_as_milestone(milestone))


def parse_race_date(value: date | str) -> date:
    """Return the race date as a calendar date.

    Accepts a ``date`` or ISO ``YYYY-MM-DD`` text. Anything else raises
    InvalidRaceDateError.
    """
    # datetime is a date subclass; keep only the calendar part
    if isinstance(value, date):
        return date(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidRaceDateError(value) from exc
    raise InvalidRaceDateError(value)


def days_until_race(race_date: date | str, today: date | None = None) -> int:
    """
    Whole calendar days from today to race day.

    Args:
        race_date: Race day
        today: Override for the current date (defaults to the local clock)

    Returns:
        Positive for a future race, 0 on race day, negative once it has passed
    """
    if today is None:
        today = date.today()
    return (parse_race_date(race_date) - parse_race_date(today)).days


def get_current_milestone(days_until: int) -> Milestone:
    """Latest milestone whose window has already opened."""
    for milestone in MILESTONE_ORDER:
        if days_until >= MILESTONE_DAYS_BEFORE[milestone]:
            return milestone
    return Milestone.RACE_MORNING


def get_adjusted_milestone(original: Milestone | str, days_until: int) -> Milestone:
    """
    Roll a milestone forward when its window has already passed.

    A task scheduled for "3 months out" on a race that is only 10 days away
    moves to the milestone that is current now, so it never vanishes.
    """
    milestone = _as_milestone(original)
    if days_until >= MILESTONE_DAYS_BEFORE[milestone]:
        return milestone
    return get_current_milestone(days_until)
