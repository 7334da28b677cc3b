"""Static task catalog.

Default templates are instantiated for every new race whose attributes
satisfy the template's eligibility tag. Personalization rules attach extra
templates to a single profile flag.
"""

import enum
from dataclasses import dataclass
from typing import Protocol

from raceprep.models import Milestone, TaskCategory


class Eligibility(str, enum.Enum):
    """Condition a race must meet for a default template to apply."""

    ALWAYS = "ALWAYS"
    REQUIRES_TRAVEL = "REQUIRES_TRAVEL"


class RaceLike(Protocol):
    is_travel_race: bool
    distance: str


@dataclass(frozen=True)
class TaskTemplate:
    """Declarative description of a task to instantiate."""

    title: str
    category: TaskCategory
    milestone: Milestone
    description: str | None = None
    eligibility: Eligibility = Eligibility.ALWAYS


@dataclass(frozen=True)
class PersonalizationRule:
    """Templates switched on and off by one profile flag."""

    flag: str
    templates: tuple[TaskTemplate, ...]


def is_eligible(template: TaskTemplate, race: RaceLike) -> bool:
    """Evaluate a template's eligibility tag against a race."""
    if template.eligibility == Eligibility.ALWAYS:
        return True
    if template.eligibility == Eligibility.REQUIRES_TRAVEL:
        return bool(race.is_travel_race)
    raise ValueError(f"Unknown eligibility: {template.eligibility!r}")


DEFAULT_TASKS: tuple[TaskTemplate, ...] = (
    # ASAP / 6 months
    TaskTemplate(
        title="Register for race and confirm entry",
        description="Complete registration, save confirmation email, and note any early bird perks.",
        category=TaskCategory.ADMIN_AND_RULES,
        milestone=Milestone.ASAP_6MO,
    ),
    TaskTemplate(
        title="Review race rules",
        description="Check cut-off times, bag drop policy, hydration stations, headphone rules.",
        category=TaskCategory.ADMIN_AND_RULES,
        milestone=Milestone.ASAP_6MO,
    ),
    TaskTemplate(
        title="Check passport validity and visa requirements",
        description="Ensure passport is valid for 6+ months after race date. Check visa needs.",
        category=TaskCategory.TRAVEL,
        milestone=Milestone.ASAP_6MO,
        eligibility=Eligibility.REQUIRES_TRAVEL,
    ),
    TaskTemplate(
        title="Note early start time and plan heat strategy",
        description="SEA races often start at 4-5am. Plan hydration, salt tabs, and cooling gear.",
        category=TaskCategory.NUTRITION_AND_STRATEGY,
        milestone=Milestone.ASAP_6MO,
    ),
    # 3 months
    TaskTemplate(
        title="Book flights and accommodation",
        description="Prefer hotels close to start/finish or with good transport links.",
        category=TaskCategory.TRAVEL,
        milestone=Milestone.MO_3,
        eligibility=Eligibility.REQUIRES_TRAVEL,
    ),
    TaskTemplate(
        title="Decide on race shoes and start using in long runs",
        description="Break in your race shoes with at least 50-80km before race day.",
        category=TaskCategory.GEAR_AND_CLOTHING,
        milestone=Milestone.MO_3,
    ),
    TaskTemplate(
        title="Research typical climate for race location",
        description="Check historical weather data and shortlist appropriate gear options.",
        category=TaskCategory.GEAR_AND_CLOTHING,
        milestone=Milestone.MO_3,
    ),
    # 1 month
    TaskTemplate(
        title="Confirm all bookings",
        description="Double-check time off work, hotel reservations, and transport arrangements.",
        category=TaskCategory.TRAVEL,
        milestone=Milestone.MO_1,
        eligibility=Eligibility.REQUIRES_TRAVEL,
    ),
    TaskTemplate(
        title="Test race-day nutrition",
        description="Practice your planned breakfast and in-race fueling during training runs.",
        category=TaskCategory.NUTRITION_AND_STRATEGY,
        milestone=Milestone.MO_1,
    ),
    TaskTemplate(
        title="Check race weekend schedule",
        description="Review expo dates, bib pickup hours, start corrals, and bag drop times.",
        category=TaskCategory.ADMIN_AND_RULES,
        milestone=Milestone.MO_1,
    ),
    # 7 days
    TaskTemplate(
        title="Check 7-day weather forecast",
        description="Refine your gear list based on expected conditions.",
        category=TaskCategory.GEAR_AND_CLOTHING,
        milestone=Milestone.D_7,
    ),
    TaskTemplate(
        title="Prepare complete packing list",
        description=(
            "Shoes, socks, kit, bib belt, hat/visor, anti-chafe, gels, watch, "
            "chargers, post-race clothes."
        ),
        category=TaskCategory.GEAR_AND_CLOTHING,
        milestone=Milestone.D_7,
    ),
    TaskTemplate(
        title="Confirm expo and bib pickup details",
        description="Note location, opening hours, and what documents you need.",
        category=TaskCategory.ADMIN_AND_RULES,
        milestone=Milestone.D_7,
    ),
    TaskTemplate(
        title="Plan transport to start line",
        description="Include buffer time for road closures and crowds.",
        category=TaskCategory.TRAVEL,
        milestone=Milestone.D_7,
    ),
    # Day before
    TaskTemplate(
        title="Lay out full race kit",
        description="Pin bib if required. Double-check everything is ready.",
        category=TaskCategory.GEAR_AND_CLOTHING,
        milestone=Milestone.D_1,
    ),
    TaskTemplate(
        title="Pack race bag and post-race clothes",
        description="Include warm layers, flip flops, and any recovery items.",
        category=TaskCategory.GEAR_AND_CLOTHING,
        milestone=Milestone.D_1,
    ),
    TaskTemplate(
        title="Charge all devices",
        description="Watch, phone, headphones. Pack power bank.",
        category=TaskCategory.PERSONAL_AND_MISC,
        milestone=Milestone.D_1,
    ),
    TaskTemplate(
        title="Set alarms and confirm breakfast timing",
        description="Set primary and backup alarms. Plan to eat 2-3 hours before start.",
        category=TaskCategory.PERSONAL_AND_MISC,
        milestone=Milestone.D_1,
    ),
    # Race morning
    TaskTemplate(
        title="Morning routine: eat, hydrate, prepare",
        description="Breakfast, hydration, toilet, anti-chafe, sunscreen if needed.",
        category=TaskCategory.NUTRITION_AND_STRATEGY,
        milestone=Milestone.RACE_MORNING,
    ),
    TaskTemplate(
        title="Final kit check",
        description="Kit, gels, bottle, transit card, room key, cash/card.",
        category=TaskCategory.GEAR_AND_CLOTHING,
        milestone=Milestone.RACE_MORNING,
    ),
    TaskTemplate(
        title="Leave for start on time",
        description="Confirm bag drop location and any meet-up points.",
        category=TaskCategory.TRAVEL,
        milestone=Milestone.RACE_MORNING,
    ),
)


# Reconciliation matches existing tasks on title, so titles here must stay
# unique across the whole catalog.
PERSONALIZATION_RULES: tuple[PersonalizationRule, ...] = (
    PersonalizationRule(
        flag="has_dependents",
        templates=(
            TaskTemplate(
                title="Arrange childcare or pet care for race weekend",
                description="Confirm arrangements well in advance.",
                category=TaskCategory.PERSONAL_AND_MISC,
                milestone=Milestone.MO_1,
            ),
        ),
    ),
    PersonalizationRule(
        flag="international_travel",
        templates=(
            TaskTemplate(
                title="Prepare travel adapters and check roaming/eSIM",
                description="Ensure you can charge devices and stay connected.",
                category=TaskCategory.TRAVEL,
                milestone=Milestone.D_7,
            ),
            TaskTemplate(
                title="Check travel insurance coverage",
                description="Ensure medical and trip cancellation coverage.",
                category=TaskCategory.ADMIN_AND_RULES,
                milestone=Milestone.MO_1,
            ),
        ),
    ),
    PersonalizationRule(
        flag="stays_in_hotel",
        templates=(
            TaskTemplate(
                title="Confirm late checkout or baggage storage",
                description="Arrange post-race access to your belongings.",
                category=TaskCategory.TRAVEL,
                milestone=Milestone.D_7,
            ),
            TaskTemplate(
                title="Check hotel breakfast timing",
                description="If breakfast starts late, plan an alternative pre-race meal.",
                category=TaskCategory.NUTRITION_AND_STRATEGY,
                milestone=Milestone.D_7,
            ),
        ),
    ),
    PersonalizationRule(
        flag="heat_sensitive",
        templates=(
            TaskTemplate(
                title="Add salt tabs and extra fluids to pack list",
                description="Consider electrolyte tablets and extra water for hot conditions.",
                category=TaskCategory.NUTRITION_AND_STRATEGY,
                milestone=Milestone.D_7,
            ),
            TaskTemplate(
                title="Pack sun protection gear",
                description="Sunscreen, hat/visor, sunglasses.",
                category=TaskCategory.GEAR_AND_CLOTHING,
                milestone=Milestone.D_7,
            ),
        ),
    ),
    PersonalizationRule(
        flag="uses_gels",
        templates=(
            TaskTemplate(
                title="Pack race gels and confirm carrying strategy",
                description="Belt, shorts pockets, or vest. Test in training.",
                category=TaskCategory.NUTRITION_AND_STRATEGY,
                milestone=Milestone.D_7,
            ),
        ),
    ),
    PersonalizationRule(
        flag="uses_hydration_pack",
        templates=(
            TaskTemplate(
                title="Clean and prepare hydration pack",
                description="Check bladder/bottles, test for leaks.",
                category=TaskCategory.GEAR_AND_CLOTHING,
                milestone=Milestone.D_7,
            ),
        ),
    ),
    PersonalizationRule(
        flag="uses_headphones",
        templates=(
            TaskTemplate(
                title="Confirm headphone rules and prepare device",
                description="Some races ban headphones. Check rules and prep playlist.",
                category=TaskCategory.PERSONAL_AND_MISC,
                milestone=Milestone.D_1,
            ),
        ),
    ),
)
