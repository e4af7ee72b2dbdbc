"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta

import pytest

from dtext.config import reset_dtext_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset the dtext configuration before and after each test for isolation.

    The configuration is a module-level singleton that persists across tests.
    """
    reset_dtext_config()
    yield
    reset_dtext_config()


@pytest.fixture
def two_weeks():
    """Every day from Monday 2024-01-01 through Sunday 2024-01-14."""
    start = datetime(2024, 1, 1)
    return [start + timedelta(days=i) for i in range(14)]
