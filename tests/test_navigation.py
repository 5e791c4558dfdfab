"""Tests for next/previous navigation."""

from datetime import datetime

import pytest

from calrange import (
    DateRange,
    EmptyRangeError,
    InvalidParameterError,
    NavigationDirection,
    RangeKind,
    Weekday,
    days_range,
    get_next,
    get_previous,
    month_exact_range,
    month_extended_range,
    navigate,
    week_range,
)


class TestNavigateWeek:
    """Test navigation of WEEK ranges."""

    def test_next(self):
        """The next week starts seven days later."""
        week = week_range(datetime(2020, 1, 10), anchor_weekday=Weekday.MONDAY)

        result = get_next(week)

        assert result.start == datetime(2020, 1, 13)
        assert result.end == datetime(2020, 1, 19)
        assert result.direction is NavigationDirection.NEXT
        assert result.is_next
        assert not result.is_previous

    def test_previous_crosses_year(self):
        """The previous week reaches back into December."""
        week = week_range(datetime(2020, 1, 10), anchor_weekday=Weekday.MONDAY)

        result = get_previous(week)

        assert result.start == datetime(2019, 12, 30)
        assert result.end == datetime(2020, 1, 5)
        assert result.is_previous

    def test_keeps_anchor_and_offsets(self):
        """Navigation reuses the anchor weekday and offsets."""
        week = week_range(
            datetime(2020, 1, 10),
            anchor_weekday=Weekday.SUNDAY,
            start_offset=5,
            end_offset=-1,
        )

        result = week.next()

        assert result.anchor_weekday == 7
        assert (result.start_offset, result.end_offset) == (5, -1)
        assert len(result) == 11
        assert result.start == datetime(2020, 1, 7)

    def test_input_unchanged(self):
        """The source range is not modified."""
        week = week_range(datetime(2020, 1, 10))
        dates = week.dates

        get_next(week)

        assert week.dates == dates
        assert week.direction is None

    def test_symmetry(self):
        """Next then previous returns to the same dates."""
        week = week_range(datetime(2020, 1, 10), start_offset=2, end_offset=3)

        assert week.next().previous().dates == week.dates


class TestNavigateDays:
    """Test navigation of DAYS ranges."""

    def test_next_moves_by_days_count(self):
        """The next range starts days_count days later."""
        days = days_range(datetime(2020, 1, 10), days_count=3)

        result = days.next()

        assert result.kind is RangeKind.DAYS
        assert result.start == datetime(2020, 1, 13)
        assert result.end == datetime(2020, 1, 15)
        assert result.days_count == 3

    def test_previous(self):
        """The previous range ends the day before."""
        days = days_range(datetime(2020, 1, 10), days_count=3)

        result = days.previous()

        assert result.start == datetime(2020, 1, 7)
        assert result.end == datetime(2020, 1, 9)

    def test_symmetry(self):
        """Previous then next returns to the same dates."""
        days = days_range(datetime(2024, 2, 27), days_count=5, end_offset=2)

        assert days.previous().next().dates == days.dates


class TestNavigateMonth:
    """Test navigation of MONTH_EXACT and MONTH_EXTENDED ranges."""

    def test_exact_next_from_month_end(self):
        """Jan 31 moves to February without overflowing into March."""
        month = month_exact_range(datetime(2023, 1, 31))

        result = month.next()

        assert result.start == datetime(2023, 2, 1)
        assert result.end == datetime(2023, 2, 28)
        assert len(result) == 28

    def test_exact_previous_crosses_year(self):
        """January's previous month is December of the prior year."""
        month = month_exact_range(datetime(2023, 1, 15))

        result = month.previous()

        assert result.start == datetime(2022, 12, 1)
        assert len(result) == 31

    def test_exact_into_leap_february(self):
        """Navigating into February 2024 yields 29 days."""
        month = month_exact_range(datetime(2024, 3, 31))

        assert len(month.previous()) == 29

    def test_extended_next(self):
        """The next extended month is padded with the same anchor."""
        month = month_extended_range(datetime(2023, 5, 31), anchor_weekday=1)

        result = month.next()

        assert result.kind is RangeKind.MONTH_EXTENDED
        assert result.start == datetime(2023, 5, 29)
        assert result.end == datetime(2023, 7, 2)
        assert result.anchor_weekday == 1

    def test_extended_keeps_offsets(self):
        """Offsets carry over to the next extended month."""
        month = month_extended_range(
            datetime(2023, 5, 15), anchor_weekday=1, start_offset=1, end_offset=1
        )

        result = month.next()

        assert len(result) == 37
        assert result.start == datetime(2023, 5, 28)

    def test_reference_is_start_of_shifted_month(self):
        """Month navigation re-anchors on the first of the month."""
        month = month_exact_range(datetime(2023, 1, 31, 14))

        assert month.next().reference_date == datetime(2023, 2, 1)

    @pytest.mark.parametrize("generator", [month_exact_range, month_extended_range])
    def test_symmetry(self, generator):
        """Next then previous returns to the same month."""
        month = generator(datetime(2023, 3, 31))

        assert month.next().previous().dates == month.dates


class TestNavigate:
    """Test the navigate entry point."""

    def test_string_direction(self):
        """Directions may be given as their string values."""
        week = week_range(datetime(2020, 1, 10))

        assert navigate(week, "next") == get_next(week)
        assert navigate(week, "previous").is_previous

    def test_chained(self):
        """Repeated navigation keeps moving in one direction."""
        week = week_range(datetime(2020, 1, 10))

        result = week.next().next().next()

        assert result.start == datetime(2020, 1, 27)

    def test_none_range(self):
        """Navigating a missing range raises EmptyRangeError."""
        with pytest.raises(EmptyRangeError, match="navigate\\(next\\)"):
            get_next(None)

    def test_range_without_dates(self):
        """A DateRange holding no dates raises EmptyRangeError."""
        empty = DateRange(
            kind=RangeKind.WEEK, reference_date=datetime(2020, 1, 10), dates=()
        )

        with pytest.raises(EmptyRangeError) as exc_info:
            get_previous(empty)

        assert exc_info.value.operation == "navigate(previous)"

    def test_not_a_range(self):
        """Other objects are rejected."""
        with pytest.raises(InvalidParameterError, match="date_range"):
            get_next([datetime(2020, 1, 10)])

    def test_unknown_direction(self):
        """Only next and previous are valid directions."""
        week = week_range(datetime(2020, 1, 10))

        with pytest.raises(InvalidParameterError, match="direction"):
            navigate(week, "sideways")
