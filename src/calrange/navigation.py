"""Next/previous navigation between ranges of the same shape."""

from dataclasses import replace
from datetime import timedelta
from typing import Any

from dateutil.relativedelta import relativedelta

from calrange.calendar import start_of_day, start_of_month
from calrange.constants import NavigationDirection, RangeKind
from calrange.errors import EmptyRangeError, InvalidParameterError
from calrange.generators import (
    days_range,
    month_exact_range,
    month_extended_range,
    week_range,
)
from calrange.logging import get_logger
from calrange.range import DateRange

_log = get_logger(__name__)


def navigate(date_range: DateRange | None, direction: Any) -> DateRange:
    """Derive the range that follows or precedes date_range.

    The new range is regenerated from a shifted reference date with the
    same anchor weekday, days count and offsets, so month lengths and leap
    years are handled by the generators. Month shaped ranges re-anchor on
    the first of the month before shifting, which keeps Jan 31 from
    overflowing into March.

    Args:
        date_range: A range produced by one of the range functions.
        direction: NavigationDirection.NEXT or NavigationDirection.PREVIOUS
            (or their string values "next" / "previous").

    Returns:
        A new DateRange with ``direction`` set.

    Raises:
        EmptyRangeError: If date_range is None or holds no dates.
        InvalidParameterError: If date_range is not a DateRange or the
            direction is unknown.
    """
    try:
        direction = NavigationDirection(direction)
    except ValueError:
        raise InvalidParameterError(
            "direction", direction, "'next' or 'previous'"
        ) from None

    operation = f"navigate({direction.value})"
    if date_range is None:
        raise EmptyRangeError(operation)
    if not isinstance(date_range, DateRange):
        raise InvalidParameterError("date_range", date_range, "a DateRange")
    if not date_range.dates:
        raise EmptyRangeError(operation)

    sign = 1 if direction is NavigationDirection.NEXT else -1
    ref = date_range.reference_date
    kind = date_range.kind

    if kind is RangeKind.DAYS:
        result = days_range(
            reference_date=start_of_day(ref)
            + timedelta(days=sign * date_range.days_count),
            days_count=date_range.days_count,
            start_offset=date_range.start_offset,
            end_offset=date_range.end_offset,
        )
    elif kind is RangeKind.WEEK:
        result = week_range(
            reference_date=start_of_day(ref) + timedelta(days=sign * 7),
            anchor_weekday=date_range.anchor_weekday,
            start_offset=date_range.start_offset,
            end_offset=date_range.end_offset,
        )
    elif kind is RangeKind.MONTH_EXACT:
        result = month_exact_range(
            reference_date=start_of_month(ref) + relativedelta(months=sign),
            start_offset=date_range.start_offset,
            end_offset=date_range.end_offset,
        )
    elif kind is RangeKind.MONTH_EXTENDED:
        result = month_extended_range(
            reference_date=start_of_month(ref) + relativedelta(months=sign),
            anchor_weekday=date_range.anchor_weekday,
            start_offset=date_range.start_offset,
            end_offset=date_range.end_offset,
        )
    else:
        raise InvalidParameterError("kind", kind, "a RangeKind")

    _log.debug(
        "range_navigated",
        kind=kind.value,
        direction=direction.value,
        reference_date=result.reference_date.isoformat(),
    )
    return replace(result, direction=direction)


def get_next(date_range: DateRange | None) -> DateRange:
    """Range of the same shape that follows date_range."""
    return navigate(date_range, NavigationDirection.NEXT)


def get_previous(date_range: DateRange | None) -> DateRange:
    """Range of the same shape that precedes date_range."""
    return navigate(date_range, NavigationDirection.PREVIOUS)
