"""
Sleep and snooze analytics.

Works on in-memory lists of SleepRecord / SnoozePattern. Storage is the
caller's concern; the tracker only groups, counts and summarizes.
"""

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta

from .config import RECENT_STREAK_DAYS, SNOOZE_DURATION_SECONDS, STREAK_BANDS, WEEK_START_WEEKDAY
from .time_math import align_awareness
from .types import SleepRecord, SnoozePattern, StreakSummary, TimeOfDay, WeeklySummary

logger = logging.getLogger(__name__)


def week_start_for(day: date) -> date:
    """First day of the week containing `day` (weeks start on WEEK_START_WEEKDAY)."""
    offset = (day.weekday() - WEEK_START_WEEKDAY) % 7
    return day - timedelta(days=offset)


def _on_or_after(moment: datetime, cutoff: datetime) -> bool:
    moment, cutoff = align_awareness(moment, cutoff)
    return moment >= cutoff


def motivational_message(current_streak: int) -> str:
    """Encouragement text for a streak length."""
    for band in STREAK_BANDS:
        if current_streak >= band.min_streak:
            return band.message
    return "Every day is a new opportunity!"


class SleepBehaviorTracker:
    """
    Accumulates morning outcomes and snooze counts.

    Records may arrive in any order; every query sorts by date itself.
    """

    def __init__(
        self,
        records: list[SleepRecord] | None = None,
        snooze_patterns: list[SnoozePattern] | None = None,
    ):
        self.records: list[SleepRecord] = list(records or [])
        self.snooze_patterns: list[SnoozePattern] = list(snooze_patterns or [])

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_sleep_record(self, record: SleepRecord) -> None:
        self.records.append(record)
        logger.debug("Added sleep record for %s (success=%s)", record.date.date(), record.is_successful)

    def add_snooze_pattern(self, pattern: SnoozePattern) -> None:
        """
        Insert or replace the snooze pattern for pattern's calendar day.

        An existing day keeps its original timestamp and takes the new count;
        total snooze time is recalculated from the count.
        """
        for index, existing in enumerate(self.snooze_patterns):
            if existing.date.date() == pattern.date.date():
                self.snooze_patterns[index] = SnoozePattern.from_count(
                    existing.date, pattern.snooze_count
                )
                logger.debug("Updated snooze pattern for %s", existing.date.date())
                return

        self.snooze_patterns.append(pattern)
        logger.debug("Added snooze pattern for %s", pattern.date.date())

    def clear(self) -> None:
        self.records.clear()
        self.snooze_patterns.clear()

    # -------------------------------------------------------------------------
    # Streaks
    # -------------------------------------------------------------------------

    def _newest_first(self) -> list[SleepRecord]:
        return sorted(self.records, key=lambda r: r.date, reverse=True)

    def current_streak(self) -> int:
        """Consecutive successful mornings counting back from the newest record."""
        streak = 0
        for record in self._newest_first():
            if not record.is_successful:
                break
            streak += 1
        return streak

    def best_streak(self) -> int:
        best = 0
        run = 0
        for record in sorted(self.records, key=lambda r: r.date):
            if record.is_successful:
                run += 1
                best = max(best, run)
            else:
                run = 0
        return best

    def streak_summary(self, recent: int = RECENT_STREAK_DAYS) -> StreakSummary:
        return StreakSummary(
            current_streak=self.current_streak(),
            best_streak=self.best_streak(),
            recent_days=self._newest_first()[:recent],
        )

    # -------------------------------------------------------------------------
    # Windows and averages
    # -------------------------------------------------------------------------

    def records_since(self, now: datetime, days: int) -> list[SleepRecord]:
        """Records dated within the last `days` days of `now`, newest first."""
        cutoff = now - timedelta(days=days)
        return [r for r in self._newest_first() if _on_or_after(r.date, cutoff)]

    def average_wake_time(self) -> TimeOfDay | None:
        """
        Mean actual wake time by clock position (None without records).

        Plain arithmetic mean of minute-of-day; wake times straddling
        midnight average toward midday.
        """
        if not self.records:
            return None
        total = sum(TimeOfDay.from_datetime(r.actual_wake_time).minutes for r in self.records)
        return TimeOfDay(total // len(self.records))

    # -------------------------------------------------------------------------
    # Weekly summaries
    # -------------------------------------------------------------------------

    def weekly_summaries(self) -> list[WeeklySummary]:
        """
        One summary per week with records, newest week first.

        Snooze time assumes SNOOZE_DURATION_SECONDS per snooze. streak_days
        carries the overall current streak on every week.
        """
        by_week: dict[date, list[SleepRecord]] = defaultdict(list)
        for record in self.records:
            by_week[week_start_for(record.date.date())].append(record)

        streak = self.current_streak()
        summaries = []
        for week_start, records in by_week.items():
            total_snoozes = sum(r.snooze_count for r in records)
            total_snooze_seconds = total_snoozes * SNOOZE_DURATION_SECONDS
            summaries.append(
                WeeklySummary(
                    week_start=week_start,
                    week_end=week_start + timedelta(days=6),
                    total_days=len(records),
                    successful_days=sum(1 for r in records if r.is_successful),
                    total_snoozes=total_snoozes,
                    average_snooze_seconds=total_snooze_seconds / len(records),
                    streak_days=streak,
                )
            )

        return sorted(summaries, key=lambda s: s.week_start, reverse=True)
