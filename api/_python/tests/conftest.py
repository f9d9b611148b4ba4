"""
Pytest fixtures for wake-up journey tests.
"""

import pytest

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
# Make helpers importable from test modules
sys.path.insert(0, str(Path(__file__).parent))

from wakeup.types import JourneySettings
from helpers import LA, la_datetime


@pytest.fixture
def default_settings() -> JourneySettings:
    """08:00 -> 06:00, not started, Los Angeles."""
    return JourneySettings.default()


@pytest.fixture
def started_settings(default_settings) -> JourneySettings:
    """Default journey started 2026-01-01 08:00 in Los Angeles."""
    return JourneySettings(
        current_wake_time=default_settings.current_wake_time,
        target_wake_time=default_settings.target_wake_time,
        is_alarm_enabled=True,
        start_date=la_datetime(2026, 1, 1, 8, 0),
        timezone=LA,
    )
