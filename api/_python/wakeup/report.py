"""
JSON-ready journey report shared by the script and HTTP entry points.
"""

from datetime import datetime
from typing import Any

from .config import ADJUSTMENT_MINUTES_PER_DAY, DEFAULT_TIMEZONE
from .progress import journey_progress, next_alarm_datetime, schedule_for
from .scheduler import build_daily_plan
from .types import JourneySettings, TimeOfDay
from .widget import build_widget_snapshot, snapshot_to_dict


def settings_from_dict(data: dict[str, Any]) -> JourneySettings:
    """
    Build JourneySettings from request fields.

    Required: current_wake_time, target_wake_time ("HH:MM").
    Optional: start_date (ISO), is_alarm_enabled, timezone.

    Raises:
        KeyError: Missing required field
        ValueError: Malformed time, date or alarm flag
    """
    start_date = data.get("start_date")
    is_alarm_enabled = data.get("is_alarm_enabled", start_date is not None)
    if not isinstance(is_alarm_enabled, bool):
        raise ValueError(f"is_alarm_enabled must be true or false, got {is_alarm_enabled!r}")

    return JourneySettings(
        current_wake_time=TimeOfDay.parse(data["current_wake_time"]),
        target_wake_time=TimeOfDay.parse(data["target_wake_time"]),
        is_alarm_enabled=is_alarm_enabled,
        start_date=datetime.fromisoformat(start_date) if start_date else None,
        timezone=data.get("timezone", DEFAULT_TIMEZONE),
    )


def build_journey_report(
    settings: JourneySettings,
    now: datetime,
    step_minutes: int = ADJUSTMENT_MINUTES_PER_DAY,
) -> dict[str, Any]:
    """
    Everything a client needs to render the journey.

    Keys are camelCase to match the widget payload.
    """
    schedule = schedule_for(settings, step_minutes)
    journey = schedule.journey()
    progress = journey_progress(settings, now, step_minutes)
    plan = build_daily_plan(schedule, progress.days_completed)

    return {
        "daysNeeded": journey.days_needed,
        "distanceMinutes": journey.distance_minutes,
        "nextWakeUp": journey.next_wake_up.format(),
        "nextWakeUpDisplay": journey.next_wake_up.format_12h(),
        "nextAlarm": next_alarm_datetime(settings, now, step_minutes).isoformat(),
        "targetReached": journey.target_reached,
        "progress": {
            "daysCompleted": progress.days_completed,
            "daysRemaining": progress.days_remaining,
            "fraction": progress.fraction,
        },
        "plan": [
            {"day": row.day, "wakeTime": row.wake_time.format(), "completed": row.is_completed}
            for row in plan
        ],
        "widget": snapshot_to_dict(build_widget_snapshot(settings, now, step_minutes)),
    }
