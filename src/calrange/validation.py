"""Parameter validation for range generation and extension."""

from datetime import datetime
from typing import Any, Sequence

from calrange.constants import TIME_UNITS
from calrange.conversion import to_datetime
from calrange.errors import InvalidParameterError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_reference_date(value: Any) -> bool:
    """Check if value can be used as a reference date."""
    try:
        to_datetime(value)
    except InvalidParameterError:
        return False
    return True


def is_valid_weekday(value: Any) -> bool:
    """Check if value is an ISO weekday number (1..7)."""
    return _is_int(value) and 1 <= value <= 7


def is_valid_offset(value: Any) -> bool:
    """Check if value is a usable offset. Offsets are signed."""
    return _is_int(value)


def is_valid_time_unit(value: Any) -> bool:
    """Check if value is a recognized time unit label."""
    return isinstance(value, str) and value in TIME_UNITS


def validate_reference_date(value: Any) -> datetime:
    """Validate and normalize a reference date. None means now."""
    if value is None:
        return datetime.now()
    return to_datetime(value, "reference_date")


def validate_weekday(value: Any, param_name: str = "anchor_weekday") -> int:
    """Validate an anchor weekday and return it as a plain int."""
    if not is_valid_weekday(value):
        raise InvalidParameterError(
            param_name,
            value,
            "an integer between 1 and 7",
            "Weekdays are numbered 1=Monday .. 7=Sunday.",
        )
    return int(value)


def validate_offset(value: Any, param_name: str) -> int:
    """Validate a start or end offset."""
    if not is_valid_offset(value):
        raise InvalidParameterError(param_name, value, "an integer")
    return value


def validate_days_count(value: Any, param_name: str = "days_count") -> int:
    """Validate the number of days of a days range."""
    if not _is_int(value) or value < 1:
        raise InvalidParameterError(param_name, value, "an integer >= 1")
    return value


def validate_time_unit(value: Any) -> str:
    """Validate a time unit label."""
    if not is_valid_time_unit(value):
        raise InvalidParameterError(
            "unit",
            value,
            f"one of: {', '.join(TIME_UNITS)}",
        )
    return value


def validate_dates(dates: Any, param_name: str = "dates") -> list[datetime]:
    """Validate a non-empty, strictly ascending sequence of datetimes.

    Checks:
    1. dates is a sequence (not a string) with at least one element
    2. Every element is a datetime
    3. Elements are strictly ascending (no duplicates)

    Raises:
        InvalidParameterError: If validation fails
    """
    if isinstance(dates, (str, bytes)) or not isinstance(dates, Sequence):
        raise InvalidParameterError(param_name, dates, "a sequence of datetimes")
    if len(dates) == 0:
        raise InvalidParameterError(param_name, dates, "a non-empty sequence")
    if not all(isinstance(dt, datetime) for dt in dates):
        raise InvalidParameterError(param_name, dates, "a sequence of datetimes")
    for previous, current in zip(dates, dates[1:]):
        if current <= previous:
            raise InvalidParameterError(
                param_name,
                dates,
                "a strictly ascending sequence without duplicates",
                f"{current.isoformat()} does not follow {previous.isoformat()}.",
            )
    return list(dates)
