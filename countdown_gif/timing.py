"""Remaining-time arithmetic: target parsing and day/hour/minute/second breakdown."""

import math
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional

from .errors import InputError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
TICK = timedelta(seconds=1)


class TimeBreakdown(NamedTuple):
    days: int
    hours: int
    minutes: int
    seconds: int


def _truncated_rem(value: float, modulus: int) -> int:
    """Truncate value, then take the remainder with the sign of the dividend."""
    return int(math.fmod(int(value), modulus))


def decompose(duration: timedelta) -> TimeBreakdown:
    """Split a duration into days/hours/minutes/seconds, all clamped at zero."""
    total_seconds = duration.total_seconds()
    total_hours = total_seconds / 3600
    total_minutes = total_seconds / 60

    # Each field comes from the full duration; a negative duration clamps every one to 0.
    days = max(0, int(total_hours / 24))
    hours = max(0, _truncated_rem(total_hours, 24))
    minutes = max(0, _truncated_rem(total_minutes, 60))
    seconds = max(0, _truncated_rem(total_seconds, 60))
    return TimeBreakdown(days, hours, minutes, seconds)


def parse_target(date_text: str, time_text: str) -> datetime:
    """Combine YYYY-MM-DD and HH:MM:SS into a UTC instant."""
    try:
        day = datetime.strptime(date_text, DATE_FORMAT).date()
    except ValueError as exc:
        raise InputError("Please provide a date in the format YYYY-MM-DD") from exc
    try:
        clock = datetime.strptime(time_text, TIME_FORMAT).time()
    except ValueError as exc:
        raise InputError("Please provide a time in the format HH:MM:SS") from exc
    return datetime.combine(day, clock, tzinfo=timezone.utc)


def sample_now(now: Optional[datetime] = None) -> datetime:
    """Current UTC instant at second precision."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).replace(microsecond=0)


def remaining_until(target: datetime, now: datetime) -> timedelta:
    """Gap between target and now; a target in the past counts as now."""
    if target < now:
        target = now
    return target - now
