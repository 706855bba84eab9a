from __future__ import annotations

import logging
from datetime import time

from timetable_rules.core.config import get_settings
from timetable_rules.schemas.time_slot import TimeSlot
from timetable_rules.schemas.verdict import Verdict, Violation
from timetable_rules.services.time_arithmetic import MINUTES_PER_DAY, minutes_to_time, time_to_minutes

logger = logging.getLogger(__name__)


def check_time_slot(
    start: str | time,
    end: str | time,
    min_duration: int | None = None,
    max_duration: int | None = None,
    *,
    step_minutes: int | None = None,
) -> Verdict:
    """Check a single day's time window.

    Duration bounds default to the configured 30-240 minutes; callers pass
    tighter bounds per activity category. ``step_minutes`` additionally
    requires the duration to be a multiple of the step.
    """
    settings = get_settings()
    lower = settings.min_slot_minutes if min_duration is None else min_duration
    upper = settings.max_slot_minutes if max_duration is None else max_duration

    start_min = time_to_minutes(start)
    end_min = time_to_minutes(end)
    duration = end_min - start_min

    if start_min >= end_min:
        logger.debug("Rejected slot %s-%s: end does not follow start", start, end)
        return Verdict.reject(Violation.inverted_range, "End time must be after start time")
    if start_min < 0 or end_min > MINUTES_PER_DAY:
        return Verdict.reject(Violation.out_of_bounds, "Slot must stay within a single day")
    if duration < lower or duration > upper:
        logger.debug("Rejected slot %s-%s: %d minutes outside [%d, %d]", start, end, duration, lower, upper)
        return Verdict.reject(
            Violation.out_of_bounds,
            f"Slot duration must be between {lower} and {upper} minutes",
            duration=duration,
            min_duration=lower,
            max_duration=upper,
        )
    if step_minutes and duration % step_minutes:
        return Verdict.reject(
            Violation.out_of_bounds,
            f"Slot duration must be a multiple of {step_minutes} minutes",
            duration=duration,
            step_minutes=step_minutes,
        )
    return Verdict.ok(duration=duration)


def validate_time_slot(
    start: str | time,
    end: str | time,
    min_duration: int | None = None,
    max_duration: int | None = None,
) -> bool:
    return check_time_slot(start, end, min_duration, max_duration).valid


def is_valid_duration(
    minutes: int,
    min_duration: int | None = None,
    max_duration: int | None = None,
    step: int | None = None,
) -> bool:
    """Lesson length check: within the slot bounds and a multiple of the step."""
    settings = get_settings()
    lower = settings.min_slot_minutes if min_duration is None else min_duration
    upper = settings.max_slot_minutes if max_duration is None else max_duration
    step = settings.duration_step_minutes if step is None else step
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        return False
    return lower <= minutes <= upper and minutes % step == 0


def is_valid_weekly_volume(minutes: int) -> bool:
    settings = get_settings()
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        return False
    return (
        settings.weekly_volume_min_minutes <= minutes <= settings.weekly_volume_max_minutes
        and minutes % settings.weekly_volume_step_minutes == 0
    )


def generate_time_slots(start: str = "08:00", end: str = "18:00", duration: int = 60) -> list[TimeSlot]:
    """Split a window into back-to-back slots; a trailing remainder is dropped."""
    if duration < 1:
        raise ValueError("duration must be positive")
    slots: list[TimeSlot] = []
    current = time_to_minutes(start)
    limit = time_to_minutes(end)
    while current + duration <= limit:
        slots.append(TimeSlot(start_time=minutes_to_time(current), end_time=minutes_to_time(current + duration)))
        current += duration
    return slots
