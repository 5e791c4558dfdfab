"""calrange - Calendar-aligned date ranges with offsets and navigation."""

from calrange.config import (
    configure_calrange,
    get_default_days_count,
    get_default_weekday,
    reset_calrange_config,
)
from calrange.constants import TIME_UNITS, NavigationDirection, RangeKind, Weekday
from calrange.conversion import to_dates, to_datetime, to_pandas, to_polars
from calrange.errors import (
    CalendarRangeError,
    EmptyRangeError,
    InvalidParameterError,
    RangeExceededError,
)
from calrange.extend import apply_offset, extend_range
from calrange.generators import (
    days_range,
    month_exact_range,
    month_extended_range,
    week_range,
)
from calrange.logging import configure_logging, get_logger
from calrange.navigation import get_next, get_previous, navigate
from calrange.range import DateRange
from calrange.utils import chunk_month_extended, find_date
from calrange.validation import (
    is_valid_offset,
    is_valid_reference_date,
    is_valid_time_unit,
    is_valid_weekday,
)

__all__ = [
    # Primary API - range generators
    "days_range",
    "week_range",
    "month_exact_range",
    "month_extended_range",
    "DateRange",
    # Navigation
    "navigate",
    "get_next",
    "get_previous",
    # Offsets
    "extend_range",
    "apply_offset",
    # Constants
    "NavigationDirection",
    "RangeKind",
    "TIME_UNITS",
    "Weekday",
    # Errors
    "CalendarRangeError",
    "EmptyRangeError",
    "InvalidParameterError",
    "RangeExceededError",
    # Utilities
    "chunk_month_extended",
    "find_date",
    # Validation predicates
    "is_valid_offset",
    "is_valid_reference_date",
    "is_valid_time_unit",
    "is_valid_weekday",
    # Conversion
    "to_dates",
    "to_datetime",
    "to_pandas",
    "to_polars",
    # Config
    "configure_calrange",
    "get_default_days_count",
    "get_default_weekday",
    "reset_calrange_config",
    # Logging
    "configure_logging",
    "get_logger",
]
__version__ = "0.1.0"
