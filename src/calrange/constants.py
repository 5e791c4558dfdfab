"""Enumerations and constants shared across calrange."""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """ISO weekday numbers (Monday=1 .. Sunday=7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class RangeKind(str, Enum):
    """Shape of a generated range. Selects the generator Navigation re-runs."""

    DAYS = "DAYS"
    WEEK = "WEEK"
    MONTH_EXACT = "MONTH-EXACT"
    MONTH_EXTENDED = "MONTH-EXTENDED"


class NavigationDirection(str, Enum):
    """Direction a range was derived in by Navigation."""

    NEXT = "next"
    PREVIOUS = "previous"


# Maps every accepted unit label to the relativedelta keyword and multiplier
# used to step one unit.
TIME_UNIT_STEPS: dict[str, tuple[str, int]] = {
    "day": ("days", 1),
    "days": ("days", 1),
    "hour": ("hours", 1),
    "hours": ("hours", 1),
    "millisecond": ("microseconds", 1000),
    "milliseconds": ("microseconds", 1000),
    "minute": ("minutes", 1),
    "minutes": ("minutes", 1),
    "month": ("months", 1),
    "months": ("months", 1),
    "quarter": ("months", 3),
    "quarters": ("months", 3),
    "second": ("seconds", 1),
    "seconds": ("seconds", 1),
    "week": ("weeks", 1),
    "weeks": ("weeks", 1),
    "year": ("years", 1),
    "years": ("years", 1),
}

TIME_UNITS: tuple[str, ...] = tuple(TIME_UNIT_STEPS)
