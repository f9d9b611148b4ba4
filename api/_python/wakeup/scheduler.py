"""
Wake-up time progression.

Moves a wake time from `current` to `target` in fixed daily steps.

Key policy: the journey always moves wake time EARLIER. The distance from
current to target is measured backward through the clock, wrapping past
midnight. A target that sits slightly later than current (06:00 -> 06:10)
is therefore almost a full day away (1430 minutes), not 10 minutes.
Taking the short path for later targets would change product behavior.
"""

import math
from dataclasses import dataclass

from .config import ADJUSTMENT_MINUTES_PER_DAY, MINUTES_PER_DAY
from .types import DayPlan, JourneyResult, TimeOfDay


def distance_minutes(current: TimeOfDay, target: TimeOfDay) -> int:
    """
    Backward-wrapping minute distance from current to target.

    Returns:
        0 when equal; otherwise how many minutes current must move earlier
        (wrapping at midnight) to land on target, in (0, 1440)
    """
    difference = target.minutes - current.minutes
    if difference > 0:
        return MINUTES_PER_DAY - difference
    return abs(difference)


def is_target_reached(current: TimeOfDay, target: TimeOfDay) -> bool:
    """True iff both name the same minute of the day."""
    return current.minutes == target.minutes


def _check_step(step_minutes: int) -> None:
    # Whole minutes only; bool is excluded even though it subclasses int
    if not isinstance(step_minutes, int) or isinstance(step_minutes, bool) or step_minutes <= 0:
        raise ValueError(f"step_minutes must be a positive integer, got {step_minutes!r}")


def compute_journey(
    current: TimeOfDay,
    target: TimeOfDay,
    step_minutes: int = ADJUSTMENT_MINUTES_PER_DAY,
) -> JourneyResult:
    """
    Days needed to reach target, and tomorrow's wake time.

    Args:
        current: Today's wake time
        target: Goal wake time
        step_minutes: Daily adjustment quantum (positive)

    Returns:
        JourneyResult. next_wake_up never overshoots the target: when less
        than one step remains, tomorrow's wake time is the target itself.
    """
    _check_step(step_minutes)

    distance = distance_minutes(current, target)
    if distance == 0:
        return JourneyResult(
            days_needed=0,
            next_wake_up=current,
            target_reached=True,
            distance_minutes=0,
        )

    days_needed = math.ceil(distance / step_minutes)
    minutes_adjustment = min(step_minutes, distance)

    return JourneyResult(
        days_needed=days_needed,
        next_wake_up=TimeOfDay(current.minutes - minutes_adjustment),
        target_reached=False,
        distance_minutes=distance,
    )


def wake_time_for_day(
    current: TimeOfDay,
    day: int,
    step_minutes: int = ADJUSTMENT_MINUTES_PER_DAY,
) -> TimeOfDay:
    """
    Wake time on zero-based `day` of the journey (linear projection).

    Precondition: 0 <= day <= days_needed. This function does not know the
    target, so it does not clamp; past days_needed it keeps stepping earlier
    beyond the target. Use WakeSchedule.wake_time_for_day for a checked call.
    """
    _check_step(step_minutes)
    # TimeOfDay wraps with a non-negative modulo, so any k * 1440 is implied
    return TimeOfDay(current.minutes - day * step_minutes)


@dataclass(frozen=True)
class WakeSchedule:
    """
    The two endpoints of a journey plus the daily step.

    Immutable; build a new one whenever current or target changes. Every
    property is recomputed on access.
    """

    current: TimeOfDay
    target: TimeOfDay
    adjustment_minutes_per_day: int = ADJUSTMENT_MINUTES_PER_DAY

    def __post_init__(self):
        _check_step(self.adjustment_minutes_per_day)

    def journey(self) -> JourneyResult:
        return compute_journey(self.current, self.target, self.adjustment_minutes_per_day)

    @property
    def distance_minutes(self) -> int:
        return distance_minutes(self.current, self.target)

    @property
    def days_needed(self) -> int:
        return self.journey().days_needed

    @property
    def next_wake_up(self) -> TimeOfDay:
        return self.journey().next_wake_up

    @property
    def is_target_reached(self) -> bool:
        return is_target_reached(self.current, self.target)

    def wake_time_for_day(self, day: int) -> TimeOfDay:
        """
        Wake time on zero-based `day`, bounded to the journey.

        Raises:
            ValueError: If day is outside [0, days_needed]
        """
        days_needed = self.days_needed
        if not 0 <= day <= days_needed:
            raise ValueError(f"day must be between 0 and {days_needed}, got {day}")
        return wake_time_for_day(self.current, day, self.adjustment_minutes_per_day)


def build_daily_plan(schedule: WakeSchedule, days_completed: int = 0) -> list[DayPlan]:
    """
    Day-by-day wake times for the whole journey.

    Row N (1-based) holds the wake time for offset N-1, so the first row is
    today's wake time and the last row is one step short of the final day.
    """
    return [
        DayPlan(
            day=offset + 1,
            wake_time=schedule.wake_time_for_day(offset),
            is_completed=offset < days_completed,
        )
        for offset in range(schedule.days_needed)
    ]
