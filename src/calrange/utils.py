"""Helpers for looking up and grouping range dates."""

from datetime import datetime
from typing import Any, Iterable

from calrange.constants import RangeKind
from calrange.conversion import to_datetime
from calrange.errors import InvalidParameterError
from calrange.range import DateRange


def find_date(value: Any, dates: Iterable[datetime]) -> datetime | None:
    """Return the element of dates equal to value, or None if absent."""
    target = to_datetime(value, "value")
    for dt in dates:
        if dt == target:
            return dt
    return None


def chunk_month_extended(
    date_range: DateRange,
    null_outside_month: bool = False,
) -> list[list[datetime | None]]:
    """Split a MONTH_EXTENDED range into consecutive weeks.

    Args:
        date_range: Range produced by month_extended_range.
        null_outside_month: Replace dates of the first and last week that
            fall outside the reference month with None, as a calendar grid
            leaves those cells blank.

    Returns:
        A list of 7-day lists (the last one shorter if offsets broke
        the week alignment).

    Raises:
        InvalidParameterError: If date_range is not a MONTH_EXTENDED range.
    """
    if not isinstance(date_range, DateRange) or (
        date_range.kind is not RangeKind.MONTH_EXTENDED
    ):
        raise InvalidParameterError(
            "date_range", date_range, "a DateRange of kind MONTH-EXTENDED"
        )
    if not isinstance(null_outside_month, bool):
        raise InvalidParameterError(
            "null_outside_month", null_outside_month, "a boolean"
        )

    dates = list(date_range.dates)
    weeks: list[list[datetime | None]] = [
        list(dates[i : i + 7]) for i in range(0, len(dates), 7)
    ]

    if null_outside_month:
        month = date_range.reference_date.month
        for week in (weeks[0], weeks[-1]):
            for i, dt in enumerate(week):
                if dt is not None and dt.month != month:
                    week[i] = None

    return weeks
