"""Offset extension: grow or trim a date sequence at either end."""

from datetime import datetime
from typing import Sequence

from calrange.calendar import shift
from calrange.errors import RangeExceededError
from calrange.logging import get_logger
from calrange.validation import validate_dates, validate_offset, validate_time_unit

_log = get_logger(__name__)


def extend_range(
    dates: Sequence[datetime],
    unit: str = "day",
    start_offset: int = 0,
    end_offset: int = 0,
) -> list[datetime]:
    """Extend or trim a date sequence at its head and tail.

    Positive offsets prepend/append dates stepped by ``unit`` from the
    original first/last date. Negative offsets drop that many dates from
    the corresponding end. The input sequence is never modified.

    Args:
        dates: Non-empty, strictly ascending datetimes.
        unit: Time unit used to step new dates ("day", "weeks", "month", ...).
        start_offset: Dates to add (positive) or remove (negative) at the head.
        end_offset: Dates to add (positive) or remove (negative) at the tail.

    Returns:
        A new ascending list of datetimes.

    Raises:
        InvalidParameterError: If an argument has the wrong shape.
        RangeExceededError: If the negative offsets would leave no dates.

    Example:
        >>> extend_range([datetime(2020, 1, 1), datetime(2020, 1, 2)], "day", 1, -1)
        [datetime.datetime(2019, 12, 31, 0, 0), datetime.datetime(2020, 1, 1, 0, 0)]
    """
    dates = validate_dates(dates)
    unit = validate_time_unit(unit)
    start_offset = validate_offset(start_offset, "start_offset")
    end_offset = validate_offset(end_offset, "end_offset")

    length = len(dates)
    if (
        length + end_offset < 1
        or length + start_offset < 1
        or (
            start_offset < 0
            and end_offset < 0
            and start_offset + end_offset + length < 1
        )
    ):
        raise RangeExceededError(start_offset, end_offset, length)

    first, last = dates[0], dates[-1]

    body = dates
    if start_offset < 0:
        body = body[-start_offset:]
    if end_offset < 0:
        body = body[: len(body) + end_offset]

    head = [shift(first, -i, unit) for i in range(start_offset, 0, -1)]
    tail = [shift(last, i, unit) for i in range(1, end_offset + 1)]

    result = head + body + tail
    _log.debug(
        "range_extended",
        unit=unit,
        start_offset=start_offset,
        end_offset=end_offset,
        length_before=length,
        length_after=len(result),
    )
    return result


# Same routine under the name the offset API has historically used.
apply_offset = extend_range
