"""Range generators for day, week and month shaped date ranges."""

from datetime import datetime
from typing import Any

from calrange.calendar import (
    ONE_DAY,
    closing_weekday,
    day_range,
    end_of_month,
    start_of_day,
    start_of_month,
    weekday_of,
)
from calrange.config import get_default_days_count, get_default_weekday
from calrange.constants import RangeKind
from calrange.extend import extend_range
from calrange.logging import get_logger
from calrange.range import DateRange
from calrange.validation import (
    validate_days_count,
    validate_offset,
    validate_reference_date,
    validate_weekday,
)

_log = get_logger(__name__)


def _finalize(
    kind: RangeKind,
    reference_date: datetime,
    dates: list[datetime],
    anchor_weekday: int,
    days_count: int,
    start_offset: int,
    end_offset: int,
) -> DateRange:
    """Apply offsets to a base sequence and wrap it in a DateRange."""
    if start_offset or end_offset:
        dates = extend_range(dates, "day", start_offset, end_offset)

    result = DateRange(
        kind=kind,
        reference_date=reference_date,
        dates=tuple(dates),
        anchor_weekday=anchor_weekday,
        days_count=days_count,
        start_offset=start_offset,
        end_offset=end_offset,
    )
    _log.debug(
        "range_generated",
        kind=kind.value,
        start=result.start.isoformat(),
        end=result.end.isoformat(),
        length=len(result),
    )
    return result


def _find_anchor(dt: datetime, anchor_weekday: int) -> datetime:
    """Walk back from dt to the closest day falling on anchor_weekday."""
    # At most 6 steps, weekdays repeat every 7 days
    while weekday_of(dt) != anchor_weekday:
        dt -= ONE_DAY
    return dt


def days_range(
    reference_date: Any = None,
    days_count: int | None = None,
    start_offset: int = 0,
    end_offset: int = 0,
) -> DateRange:
    """Generate days_count consecutive days starting at reference_date.

    Args:
        reference_date: First day of the range. Defaults to now.
        days_count: Number of days (>= 1). Defaults to the configured
            default_days_count (1).
        start_offset: Days to add (positive) or remove (negative) at the head.
        end_offset: Days to add (positive) or remove (negative) at the tail.
    """
    reference_date = validate_reference_date(reference_date)
    if days_count is None:
        days_count = get_default_days_count()
    days_count = validate_days_count(days_count)
    start_offset = validate_offset(start_offset, "start_offset")
    end_offset = validate_offset(end_offset, "end_offset")

    first = start_of_day(reference_date)
    dates = [first + i * ONE_DAY for i in range(days_count)]

    return _finalize(
        RangeKind.DAYS,
        reference_date,
        dates,
        get_default_weekday(),
        days_count,
        start_offset,
        end_offset,
    )


def week_range(
    reference_date: Any = None,
    anchor_weekday: int | None = None,
    start_offset: int = 0,
    end_offset: int = 0,
) -> DateRange:
    """Generate the 7-day week containing reference_date.

    The week starts on anchor_weekday, found by walking back from
    reference_date.

    Args:
        reference_date: Any day inside the week. Defaults to now.
        anchor_weekday: Weekday the week starts on (1=Monday .. 7=Sunday).
            Defaults to the configured default_weekday (Monday).
        start_offset: Days to add (positive) or remove (negative) at the head.
        end_offset: Days to add (positive) or remove (negative) at the tail.

    Example:
        >>> week = week_range(datetime(2020, 1, 10), Weekday.MONDAY)
        >>> week.start, week.end
        (datetime.datetime(2020, 1, 6, 0, 0), datetime.datetime(2020, 1, 12, 0, 0))
    """
    reference_date = validate_reference_date(reference_date)
    if anchor_weekday is None:
        anchor_weekday = get_default_weekday()
    anchor_weekday = validate_weekday(anchor_weekday)
    start_offset = validate_offset(start_offset, "start_offset")
    end_offset = validate_offset(end_offset, "end_offset")

    first = _find_anchor(start_of_day(reference_date), anchor_weekday)
    dates = [first + i * ONE_DAY for i in range(7)]

    return _finalize(
        RangeKind.WEEK,
        reference_date,
        dates,
        anchor_weekday,
        0,
        start_offset,
        end_offset,
    )


def month_exact_range(
    reference_date: Any = None,
    start_offset: int = 0,
    end_offset: int = 0,
) -> DateRange:
    """Generate every day of the calendar month containing reference_date."""
    reference_date = validate_reference_date(reference_date)
    start_offset = validate_offset(start_offset, "start_offset")
    end_offset = validate_offset(end_offset, "end_offset")

    dates = list(
        day_range(start_of_month(reference_date), end_of_month(reference_date))
    )

    return _finalize(
        RangeKind.MONTH_EXACT,
        reference_date,
        dates,
        get_default_weekday(),
        0,
        start_offset,
        end_offset,
    )


def month_extended_range(
    reference_date: Any = None,
    anchor_weekday: int | None = None,
    start_offset: int = 0,
    end_offset: int = 0,
) -> DateRange:
    """Generate the month containing reference_date padded to full weeks.

    The range starts on the last anchor_weekday on or before the first of
    the month and ends on the first closing weekday on or after the last
    day of the month, so its length is always a multiple of 7 (28 to 42).

    Args:
        reference_date: Any day inside the month. Defaults to now.
        anchor_weekday: Weekday the weeks start on (1=Monday .. 7=Sunday).
            Defaults to the configured default_weekday (Monday).
        start_offset: Days to add (positive) or remove (negative) at the head.
        end_offset: Days to add (positive) or remove (negative) at the tail.
    """
    reference_date = validate_reference_date(reference_date)
    if anchor_weekday is None:
        anchor_weekday = get_default_weekday()
    anchor_weekday = validate_weekday(anchor_weekday)
    start_offset = validate_offset(start_offset, "start_offset")
    end_offset = validate_offset(end_offset, "end_offset")

    first = _find_anchor(start_of_month(reference_date), anchor_weekday)
    dates = list(day_range(first, end_of_month(reference_date)))

    last_weekday = closing_weekday(anchor_weekday)
    while weekday_of(dates[-1]) != last_weekday:
        dates.append(dates[-1] + ONE_DAY)

    return _finalize(
        RangeKind.MONTH_EXTENDED,
        reference_date,
        dates,
        anchor_weekday,
        0,
        start_offset,
        end_offset,
    )
