"""Minute-of-day arithmetic for "HH:MM" time points.

Every rule in the engine compares times on a linear scale of minutes since
midnight, so malformed text is rejected here instead of leaking into
comparisons further down.
"""
from __future__ import annotations

import re
from datetime import time

from timetable_rules.core.exceptions import InvalidTimeFormat

MINUTES_PER_DAY = 24 * 60

# Database TIME columns come back as HH:MM:SS; seconds are ignored.
TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)(?::[0-5]\d)?$")


def time_to_minutes(value: str | time) -> int:
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        raise InvalidTimeFormat(value)
    match = TIME_PATTERN.match(value.strip())
    if match is None:
        raise InvalidTimeFormat(value)
    hours, minutes = match.group(1), match.group(2)
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    if minutes < 0 or minutes >= MINUTES_PER_DAY:
        raise InvalidTimeFormat(minutes)
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def is_valid_time_format(value) -> bool:
    try:
        time_to_minutes(value)
    except InvalidTimeFormat:
        return False
    return True


def add_minutes(value: str | time, minutes: int) -> str:
    return minutes_to_time(time_to_minutes(value) + minutes)


def duration_minutes(start: str | time, end: str | time) -> int:
    return time_to_minutes(end) - time_to_minutes(start)


def compare_times(first: str | time, second: str | time) -> int:
    a, b = time_to_minutes(first), time_to_minutes(second)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def is_time_in_range(value: str | time, start: str | time, end: str | time) -> bool:
    """Closed range check: both boundaries count as inside."""
    return time_to_minutes(start) <= time_to_minutes(value) <= time_to_minutes(end)
