"""
Tunable constants for wake-up journeys.

All values here are product decisions, not physiology:
- The app shifts wake time earlier by a fixed quantum each day
- A snooze is always counted as 5 minutes
"""

from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60

# Daily step by which the alarm moves earlier
ADJUSTMENT_MINUTES_PER_DAY = 15

# Snooze bookkeeping (each snooze = 5 minutes)
SNOOZE_DURATION_SECONDS = 300

# Lateness at which a morning's success percentage reaches zero
LATE_GRACE_SECONDS = 3600

# Defaults for a fresh install
DEFAULT_CURRENT_WAKE_TIME = "08:00"
DEFAULT_TARGET_WAKE_TIME = "06:00"
DEFAULT_TIMEZONE = "America/Los_Angeles"

# Analytics windows
RECENT_STREAK_DAYS = 7
WEEK_START_WEEKDAY = 6  # Sunday (datetime.weekday() numbering)


@dataclass(frozen=True)
class StreakBand:
    """Message shown for a range of consecutive successful mornings."""

    min_streak: int
    message: str


# Ordered high to low; first band whose min_streak <= streak wins
STREAK_BANDS: tuple[StreakBand, ...] = (
    StreakBand(30, "30-day champion! You've mastered your mornings!"),
    StreakBand(14, "You're crushing it! Halfway to your goal!"),
    StreakBand(7, "One week strong! Amazing progress!"),
    StreakBand(3, "You're building a great habit!"),
    StreakBand(1, "Great start! Keep it going!"),
    StreakBand(0, "Start your journey to better mornings!"),
)
