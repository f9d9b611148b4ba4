"""
ZenRise Wake-Up Journeys

Shifts a user's wake time toward a target in fixed daily steps (15 minutes
by default), always moving earlier and wrapping past midnight.

Main entry points: compute_journey, wake_time_for_day, WakeSchedule
"""

from .behavior import SleepBehaviorTracker, motivational_message
from .progress import (
    advance_journey,
    days_completed,
    journey_progress,
    next_alarm_datetime,
    progress_fraction,
    schedule_for,
    start_journey,
)
from .scheduler import (
    WakeSchedule,
    build_daily_plan,
    compute_journey,
    distance_minutes,
    is_target_reached,
    wake_time_for_day,
)
from .types import (
    DayPlan,
    JourneyProgress,
    JourneyResult,
    JourneySettings,
    SleepRecord,
    SnoozePattern,
    StreakSummary,
    TimeOfDay,
    WeeklySummary,
    WidgetSnapshot,
)
from .widget import build_widget_snapshot, snapshot_from_dict, snapshot_to_dict

__all__ = [
    # Types
    "TimeOfDay",
    "JourneyResult",
    "DayPlan",
    "JourneySettings",
    "JourneyProgress",
    "SleepRecord",
    "SnoozePattern",
    "WeeklySummary",
    "StreakSummary",
    "WidgetSnapshot",
    # Scheduler
    "WakeSchedule",
    "compute_journey",
    "wake_time_for_day",
    "distance_minutes",
    "is_target_reached",
    "build_daily_plan",
    # Progress
    "schedule_for",
    "start_journey",
    "days_completed",
    "progress_fraction",
    "journey_progress",
    "advance_journey",
    "next_alarm_datetime",
    # Behavior
    "SleepBehaviorTracker",
    "motivational_message",
    # Widget
    "build_widget_snapshot",
    "snapshot_to_dict",
    "snapshot_from_dict",
]
