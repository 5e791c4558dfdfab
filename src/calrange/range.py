"""DateRange value object describing a generated range."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterator

from calrange.constants import NavigationDirection, RangeKind
from calrange.conversion import to_dates, to_pandas, to_polars


@dataclass(frozen=True)
class DateRange:
    """A generated range of consecutive days plus the parameters behind it.

    Instances are immutable values. They are produced by the range
    functions in calrange.generators and by navigation; next() and
    previous() return new instances and leave this one untouched.

    Attributes:
        kind: Shape of the range, selects the generator navigation re-runs.
        reference_date: Date the unextended range was computed from.
        anchor_weekday: Weekday a week starts on (1=Monday .. 7=Sunday).
            Used by WEEK and MONTH_EXTENDED ranges, stored for all kinds.
        days_count: Number of base days of a DAYS range, 0 otherwise.
        start_offset: Days added (positive) or removed (negative) at the head.
        end_offset: Days added (positive) or removed (negative) at the tail.
        dates: Ascending, day-contiguous datetimes at start of day.
        direction: How navigation produced this range, None if generated.
    """

    kind: RangeKind
    reference_date: datetime
    dates: tuple[datetime, ...]
    anchor_weekday: int = 1
    days_count: int = 0
    start_offset: int = 0
    end_offset: int = 0
    direction: NavigationDirection | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[datetime]:
        return iter(self.dates)

    def __contains__(self, item: Any) -> bool:
        return item in self.dates

    def __repr__(self) -> str:
        if not self.dates:
            return f"DateRange(kind={self.kind.value}, empty)"
        return (
            f"DateRange(kind={self.kind.value}, "
            f"start={self.start.date().isoformat()}, "
            f"end={self.end.date().isoformat()}, days={len(self.dates)})"
        )

    @property
    def start(self) -> datetime:
        """First date of the range."""
        return self.dates[0]

    @property
    def end(self) -> datetime:
        """Last date of the range."""
        return self.dates[-1]

    @property
    def is_next(self) -> bool:
        return self.direction is NavigationDirection.NEXT

    @property
    def is_previous(self) -> bool:
        return self.direction is NavigationDirection.PREVIOUS

    def next(self) -> "DateRange":
        """Range of the same shape that follows this one."""
        from calrange.navigation import get_next

        return get_next(self)

    def previous(self) -> "DateRange":
        """Range of the same shape that precedes this one."""
        from calrange.navigation import get_previous

        return get_previous(self)

    def to_datetimes(self) -> list[datetime]:
        return list(self.dates)

    def to_dates(self) -> list[date]:
        return to_dates(self.dates)

    def to_pandas(self, name: str = "date") -> Any:
        """Dates as a pandas DatetimeIndex."""
        return to_pandas(self.dates, name=name)

    def to_polars(self, name: str = "date") -> Any:
        """Dates as a polars Series."""
        return to_polars(self.dates, name=name)
