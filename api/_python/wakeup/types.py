"""
Data structures for wake-up journeys.

TimeOfDay is the core value type: an always-valid minute of the day.
Everything else is either a derived result (JourneyResult, DayPlan,
JourneyProgress) or a record owned by the tracking/analytics layer.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from functools import total_ordering

from .config import (
    DEFAULT_CURRENT_WAKE_TIME,
    DEFAULT_TARGET_WAKE_TIME,
    DEFAULT_TIMEZONE,
    LATE_GRACE_SECONDS,
    MINUTES_PER_DAY,
    SNOOZE_DURATION_SECONDS,
)
from .time_math import bind_to_date

# =============================================================================
# Time of day
# =============================================================================


@total_ordering
@dataclass(frozen=True)
class TimeOfDay:
    """
    A point in the 24-hour cycle, as minutes since midnight.

    Any integer is accepted and wrapped into [0, 1440), so construction
    never fails: TimeOfDay(-15) is 23:45 and TimeOfDay(1440) is 00:00.
    """

    minutes: int

    def __post_init__(self):
        object.__setattr__(self, "minutes", int(self.minutes) % MINUTES_PER_DAY)

    @classmethod
    def from_hm(cls, hour: int, minute: int) -> "TimeOfDay":
        return cls(hour * 60 + minute)

    @classmethod
    def parse(cls, time_str: str) -> "TimeOfDay":
        """
        Parse "HH:MM" (24-hour).

        Raises:
            ValueError: If the string is not two colon-separated integers in range
        """
        parts = time_str.split(":")
        if len(parts) != 2:
            raise ValueError(f"Invalid time format (expected HH:MM): {time_str!r}")
        hour, minute = int(parts[0]), int(parts[1])
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise ValueError(f"Time out of range: {time_str!r}")
        return cls.from_hm(hour, minute)

    @classmethod
    def from_time(cls, t: time) -> "TimeOfDay":
        return cls.from_hm(t.hour, t.minute)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "TimeOfDay":
        """Keep only hour and minute; the date part is discarded."""
        return cls.from_hm(dt.hour, dt.minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def to_time(self) -> time:
        return time(self.hour, self.minute)

    def format(self) -> str:
        """24-hour "HH:MM" for data fields."""
        return f"{self.hour:02d}:{self.minute:02d}"

    def format_12h(self) -> str:
        """12-hour "H:MM AM/PM" for user-facing text."""
        period = "AM" if self.hour < 12 else "PM"
        hour = self.hour % 12 or 12
        return f"{hour}:{self.minute:02d} {period}"

    def on_date(self, day: date, tz_name: str = DEFAULT_TIMEZONE) -> datetime:
        """Bind to a calendar date for display or alarm scheduling."""
        return bind_to_date(self.to_time(), day, tz_name)

    def __lt__(self, other: "TimeOfDay") -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.minutes < other.minutes

    def __str__(self) -> str:
        return self.format()


# =============================================================================
# Journey results
# =============================================================================


@dataclass(frozen=True)
class JourneyResult:
    """Outcome of compute_journey for one (current, target, step) triple."""

    days_needed: int
    next_wake_up: TimeOfDay  # Tomorrow's alarm time
    target_reached: bool
    distance_minutes: int  # Backward-wrapping distance current -> target


@dataclass(frozen=True)
class DayPlan:
    """One row of the day-by-day wake schedule."""

    day: int  # 1-based, for display
    wake_time: TimeOfDay
    is_completed: bool


# =============================================================================
# Settings / tracking
# =============================================================================


@dataclass(frozen=True)
class JourneySettings:
    """
    User-owned journey state.

    Passed explicitly to whatever needs it; replaced (not mutated) on change.
    """

    current_wake_time: TimeOfDay
    target_wake_time: TimeOfDay
    is_alarm_enabled: bool = False
    start_date: datetime | None = None  # Set when the journey starts
    has_completed_onboarding: bool = False
    timezone: str = DEFAULT_TIMEZONE  # IANA timezone for calendar edges

    @classmethod
    def default(cls) -> "JourneySettings":
        return cls(
            current_wake_time=TimeOfDay.parse(DEFAULT_CURRENT_WAKE_TIME),
            target_wake_time=TimeOfDay.parse(DEFAULT_TARGET_WAKE_TIME),
        )


@dataclass(frozen=True)
class JourneyProgress:
    """Snapshot of how far a started journey has come."""

    days_completed: int
    days_needed: int
    days_remaining: int
    fraction: float  # 0.0 - 1.0
    next_wake_up: TimeOfDay
    target_reached: bool


# =============================================================================
# Sleep behavior
# =============================================================================


@dataclass(frozen=True)
class SleepRecord:
    """One morning's outcome."""

    date: datetime
    actual_wake_time: datetime
    target_wake_time: datetime
    snooze_count: int
    is_successful: bool  # Woke up at or before target
    alarm_enabled: bool = True

    @property
    def time_difference_seconds(self) -> float:
        """Positive when late, negative when early."""
        return (self.actual_wake_time - self.target_wake_time).total_seconds()

    @property
    def is_early_or_on_time(self) -> bool:
        return self.actual_wake_time <= self.target_wake_time

    @property
    def success_percentage(self) -> float:
        """1.0 when on time, dropping linearly to 0.0 at one hour late."""
        if self.is_early_or_on_time:
            return 1.0
        return max(0.0, 1.0 - self.time_difference_seconds / LATE_GRACE_SECONDS)


@dataclass(frozen=True)
class SnoozePattern:
    """Snooze activity for one calendar day."""

    date: datetime
    snooze_count: int
    total_snooze_seconds: float

    @classmethod
    def from_count(cls, day: datetime, snooze_count: int) -> "SnoozePattern":
        return cls(day, snooze_count, snooze_count * SNOOZE_DURATION_SECONDS)

    @property
    def snooze_minutes(self) -> int:
        return int(self.total_snooze_seconds // 60)


@dataclass(frozen=True)
class WeeklySummary:
    week_start: date
    week_end: date
    total_days: int
    successful_days: int
    total_snoozes: int
    average_snooze_seconds: float
    streak_days: int

    @property
    def success_rate(self) -> float:
        if self.total_days == 0:
            return 0.0
        return self.successful_days / self.total_days

    @property
    def average_snooze_minutes(self) -> int:
        return int(self.average_snooze_seconds // 60)


@dataclass(frozen=True)
class StreakSummary:
    current_streak: int
    best_streak: int
    recent_days: list[SleepRecord] = field(default_factory=list)  # Newest first


# =============================================================================
# Widget
# =============================================================================


@dataclass(frozen=True)
class WidgetSnapshot:
    """Data shared with the home-screen widget."""

    current_wake_time: TimeOfDay
    target_wake_time: TimeOfDay
    is_alarm_enabled: bool
    start_date: datetime | None
    days_remaining: int
    next_wake_up_time: datetime  # Bound to tomorrow in the user's timezone
