"""Day-granularity calendar arithmetic on datetimes."""

from datetime import datetime, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta

from calrange.constants import TIME_UNIT_STEPS

ONE_DAY = timedelta(days=1)


def start_of_day(dt: datetime) -> datetime:
    """Truncate a datetime to midnight, keeping its tzinfo."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_month(dt: datetime) -> datetime:
    """Midnight of the first day of dt's month."""
    return start_of_day(dt).replace(day=1)


def end_of_month(dt: datetime) -> datetime:
    """Midnight of the last calendar day of dt's month."""
    return start_of_month(dt) + relativedelta(months=1) - ONE_DAY


def weekday_of(dt: datetime) -> int:
    """ISO weekday of dt (Monday=1 .. Sunday=7)."""
    return dt.isoweekday()


def closing_weekday(anchor_weekday: int) -> int:
    """Weekday that closes a week starting on anchor_weekday."""
    return 7 if anchor_weekday == 1 else anchor_weekday - 1


def shift(dt: datetime, periods: int, unit: str = "day") -> datetime:
    """Shift dt by N units.

    Month based units clamp to the last day of shorter months, so
    Jan 31 shifted by one month lands on Feb 28 (or 29).

    Args:
        dt: Datetime to shift.
        periods: Number of units, negative to move backward.
        unit: One of calrange.constants.TIME_UNITS.
    """
    if periods == 0:
        return dt
    keyword, multiplier = TIME_UNIT_STEPS[unit]
    return dt + relativedelta(**{keyword: periods * multiplier})


def day_range(start_dt: datetime, end_dt: datetime) -> Iterator[datetime]:
    """Generate every day in [start_dt, end_dt]."""
    current = start_dt
    while current <= end_dt:
        yield current
        current += ONE_DAY
