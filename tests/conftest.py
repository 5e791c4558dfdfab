"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from calrange.config import reset_calrange_config


@pytest.fixture(autouse=True)
def reset_calrange_config_for_all_tests():
    """Reset module-level config and structlog before and after each test.

    The config is a module-level singleton that persists across tests.
    This fixture ensures each test starts with the default weekday and
    days count.
    """
    reset_calrange_config()
    yield
    reset_calrange_config()
    structlog.reset_defaults()
