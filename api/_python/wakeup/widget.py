"""
Widget snapshot.

The widget cannot run the scheduler itself, so the app precomputes what it
shows (days remaining, next wake time) and shares it as a flat dict.
"""

from datetime import datetime
from typing import Any

from .progress import next_alarm_datetime, schedule_for
from .types import JourneySettings, TimeOfDay, WidgetSnapshot


def build_widget_snapshot(
    settings: JourneySettings,
    now: datetime,
    step_minutes: int | None = None,
) -> WidgetSnapshot:
    """Snapshot the settings and derived journey values as of `now`."""
    return WidgetSnapshot(
        current_wake_time=settings.current_wake_time,
        target_wake_time=settings.target_wake_time,
        is_alarm_enabled=settings.is_alarm_enabled,
        start_date=settings.start_date,
        days_remaining=schedule_for(settings, step_minutes).days_needed,
        next_wake_up_time=next_alarm_datetime(settings, now, step_minutes),
    )


def snapshot_to_dict(snapshot: WidgetSnapshot) -> dict[str, Any]:
    """Serialize with camelCase keys, "HH:MM" times and ISO datetimes."""
    return {
        "currentWakeUpTime": snapshot.current_wake_time.format(),
        "targetWakeUpTime": snapshot.target_wake_time.format(),
        "isAlarmEnabled": snapshot.is_alarm_enabled,
        "startDate": snapshot.start_date.isoformat() if snapshot.start_date else None,
        "daysRemaining": snapshot.days_remaining,
        "nextWakeUpTime": snapshot.next_wake_up_time.isoformat(),
    }


def snapshot_from_dict(data: dict[str, Any]) -> WidgetSnapshot:
    """Inverse of snapshot_to_dict. Raises KeyError/ValueError on bad input."""
    start_date = data.get("startDate")
    return WidgetSnapshot(
        current_wake_time=TimeOfDay.parse(data["currentWakeUpTime"]),
        target_wake_time=TimeOfDay.parse(data["targetWakeUpTime"]),
        is_alarm_enabled=bool(data["isAlarmEnabled"]),
        start_date=datetime.fromisoformat(start_date) if start_date else None,
        days_remaining=int(data["daysRemaining"]),
        next_wake_up_time=datetime.fromisoformat(data["nextWakeUpTime"]),
    )
