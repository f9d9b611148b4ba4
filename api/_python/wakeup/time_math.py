"""
Calendar edges of the journey math.

The journey math works purely on minutes since midnight (see TimeOfDay).
Real calendar dates only appear at the edges: "now" in the user's
timezone and binding a computed wake time to a concrete day for alarms and widgets.
"""

from datetime import date, datetime, time, timedelta

import pytz


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """
    Get current datetime in the specified timezone.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        Current timezone-aware datetime in that zone
    """
    tz = pytz.timezone(tz_name)
    return datetime.now(pytz.UTC).astimezone(tz)


def localize(dt: datetime, tz_name: str) -> datetime:
    """Attach tz_name to a naive datetime, or convert an aware one into it."""
    tz = pytz.timezone(tz_name)
    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


def bind_to_date(t: time, day: date, tz_name: str) -> datetime:
    """
    Attach a clock time to a calendar date in a timezone.

    Output-only: nothing in the journey math depends on the date part.
    """
    return localize(datetime.combine(day, t), tz_name)


def tomorrow_of(now: datetime, tz_name: str) -> date:
    """Calendar date of the day after `now`, as seen in tz_name."""
    return (localize(now, tz_name) + timedelta(days=1)).date()


def align_awareness(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    """
    Make two datetimes comparable.

    If exactly one side is aware, the naive side is assumed to be in the
    aware side's zone. Pairs that are both naive or both aware pass through.
    """
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b
    if a.tzinfo is None:
        return a.replace(tzinfo=b.tzinfo), b
    return a, b.replace(tzinfo=a.tzinfo)


def whole_days_between(start: datetime, end: datetime) -> int:
    """Count full 24-hour periods from start to end (negative if end is earlier)."""
    start, end = align_awareness(start, end)
    delta = end - start
    # timedelta.days floors toward negative infinity; truncate instead
    if delta < timedelta(0):
        return -((-delta).days)
    return delta.days
