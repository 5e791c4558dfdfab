"""Conversion between calrange dates and other date representations."""

from datetime import date, datetime
from typing import Any, Iterable

import pandas as pd

from calrange.errors import InvalidParameterError


def to_datetime(value: Any, param_name: str = "reference_date") -> datetime:
    """Normalize a date-like value to a datetime.

    Accepts datetime, date, pandas.Timestamp, or an ISO-8601 string.

    Raises:
        InvalidParameterError: If value cannot be interpreted as a date.
    """
    # NaT subclasses datetime, check it first
    if value is pd.NaT:
        raise InvalidParameterError(param_name, value, "a valid date")
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise InvalidParameterError(
                param_name, value, "an ISO-8601 date string"
            ) from None
    raise InvalidParameterError(
        param_name, value, "a datetime, date, pandas.Timestamp or ISO-8601 string"
    )


def to_dates(dates: Iterable[datetime]) -> list[date]:
    """Drop the time component of each datetime."""
    return [dt.date() for dt in dates]


def to_pandas(dates: Iterable[datetime], name: str = "date") -> pd.DatetimeIndex:
    """Convert dates to a pandas DatetimeIndex."""
    return pd.DatetimeIndex(list(dates), name=name)


def to_polars(dates: Iterable[datetime], name: str = "date") -> Any:
    """Convert dates to a polars Series of dtype Datetime."""
    import polars as pl

    return pl.Series(name, list(dates))
