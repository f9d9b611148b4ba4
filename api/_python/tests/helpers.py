"""
Shared helpers for wake-up journey tests.
"""

from datetime import datetime, timedelta

import pytz

from wakeup.types import SleepRecord, TimeOfDay

LA = "America/Los_Angeles"


def hm(time_str: str) -> TimeOfDay:
    """Shorthand for TimeOfDay.parse."""
    return TimeOfDay.parse(time_str)


def la_datetime(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """Aware datetime in Los Angeles."""
    return pytz.timezone(LA).localize(datetime(year, month, day, hour, minute))


def make_record(day: int, late_minutes: int = 0, snoozes: int = 0) -> SleepRecord:
    """
    Sleep record for January `day`, 2026 with a 06:30 target.

    Negative late_minutes means the user woke up early.
    """
    target = datetime(2026, 1, day, 6, 30)
    return SleepRecord(
        date=datetime(2026, 1, day, 7, 0),
        actual_wake_time=target + timedelta(minutes=late_minutes),
        target_wake_time=target,
        snooze_count=snoozes,
        is_successful=late_minutes <= 0,
    )
