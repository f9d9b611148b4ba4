"""
Journey tracking on top of the pure schedule.

This is the caller side of the scheduler: it owns the start date, counts
elapsed days, advances `current` to tomorrow's wake time after each
completed morning, and binds wake times to real dates for alarms.
"""

import logging
from dataclasses import replace
from datetime import datetime

from .scheduler import WakeSchedule
from .time_math import bind_to_date, tomorrow_of, whole_days_between
from .types import JourneyProgress, JourneySettings

logger = logging.getLogger(__name__)


def schedule_for(settings: JourneySettings, step_minutes: int | None = None) -> WakeSchedule:
    """Build the WakeSchedule for the settings' current and target times."""
    if step_minutes is None:
        return WakeSchedule(settings.current_wake_time, settings.target_wake_time)
    return WakeSchedule(settings.current_wake_time, settings.target_wake_time, step_minutes)


def start_journey(settings: JourneySettings, now: datetime) -> JourneySettings:
    """Stamp the start date and turn the alarm on."""
    logger.debug(
        "Starting journey %s -> %s",
        settings.current_wake_time,
        settings.target_wake_time,
    )
    return replace(settings, start_date=now, is_alarm_enabled=True)


def days_completed(start_date: datetime | None, now: datetime, total_days: int) -> int:
    """
    Whole days elapsed since start_date, clamped to [0, total_days].

    A journey that has not started has completed 0 days.
    """
    if start_date is None:
        return 0
    elapsed = whole_days_between(start_date, now)
    return max(0, min(elapsed, total_days))


def progress_fraction(completed: int, total_days: int) -> float:
    """Share of the journey done (0.0 when there is nothing to do)."""
    if total_days <= 0:
        return 0.0
    return completed / total_days


def journey_progress(
    settings: JourneySettings,
    now: datetime,
    step_minutes: int | None = None,
) -> JourneyProgress:
    """
    Summarize progress for display.

    Args:
        settings: Current journey settings
        now: Reference "now" (aware or naive)
        step_minutes: Override for the daily step

    Returns:
        JourneyProgress with completed/remaining day counts and tomorrow's time
    """
    journey = schedule_for(settings, step_minutes).journey()
    completed = days_completed(settings.start_date, now, journey.days_needed)
    return JourneyProgress(
        days_completed=completed,
        days_needed=journey.days_needed,
        days_remaining=journey.days_needed - completed,
        fraction=progress_fraction(completed, journey.days_needed),
        next_wake_up=journey.next_wake_up,
        target_reached=journey.target_reached,
    )


def advance_journey(settings: JourneySettings, step_minutes: int | None = None) -> JourneySettings:
    """
    Move current wake time to tomorrow's wake time.

    Called once per completed morning. Once the target is reached the
    settings are returned unchanged.
    """
    schedule = schedule_for(settings, step_minutes)
    if schedule.is_target_reached:
        return settings

    next_wake_up = schedule.next_wake_up
    logger.debug("Advancing journey %s -> %s", settings.current_wake_time, next_wake_up)
    return replace(settings, current_wake_time=next_wake_up)


def next_alarm_datetime(
    settings: JourneySettings,
    now: datetime,
    step_minutes: int | None = None,
) -> datetime:
    """
    Tomorrow's wake time as an aware datetime in the settings timezone.

    The date part comes from `now`; the time part from the schedule.
    """
    next_wake_up = schedule_for(settings, step_minutes).next_wake_up
    return bind_to_date(
        next_wake_up.to_time(), tomorrow_of(now, settings.timezone), settings.timezone
    )

