"""Module-level configuration for calrange defaults."""

import threading
from dataclasses import dataclass

from calrange.constants import Weekday


@dataclass
class CalrangeConfig:
    """Configuration for calrange defaults."""

    default_weekday: int = Weekday.MONDAY
    default_days_count: int = 1


# Module-level singleton
_calrange_config: CalrangeConfig | None = None
_config_lock = threading.Lock()


def get_calrange_config() -> CalrangeConfig:
    """Get the global calrange configuration singleton."""
    global _calrange_config
    if _calrange_config is None:
        with _config_lock:
            if _calrange_config is None:
                _calrange_config = CalrangeConfig()
    return _calrange_config


def configure_calrange(
    default_weekday: int | None = None,
    default_days_count: int | None = None,
) -> None:
    """Configure default calrange settings.

    Args:
        default_weekday: Anchor weekday (1=Monday .. 7=Sunday) used by
            week_range and month_extended_range when none is passed.
        default_days_count: Number of days days_range generates when no
            days_count is passed.

    Raises:
        InvalidParameterError: If a value is outside its allowed domain.

    Example:
        from calrange import Weekday, configure_calrange

        # Weeks start on Sunday from now on
        configure_calrange(default_weekday=Weekday.SUNDAY)
        week = week_range(reference_date=datetime(2020, 1, 10))
    """
    from calrange.validation import validate_days_count, validate_weekday

    if default_weekday is not None:
        validate_weekday(default_weekday, "default_weekday")
    if default_days_count is not None:
        validate_days_count(default_days_count, "default_days_count")

    config = get_calrange_config()
    with _config_lock:
        if default_weekday is not None:
            config.default_weekday = int(default_weekday)
        if default_days_count is not None:
            config.default_days_count = default_days_count


def get_default_weekday() -> int:
    """Get the default anchor weekday."""
    return get_calrange_config().default_weekday


def get_default_days_count() -> int:
    """Get the default days count."""
    return get_calrange_config().default_days_count


def reset_calrange_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calrange_config
    with _config_lock:
        _calrange_config = CalrangeConfig()
