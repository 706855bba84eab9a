"""Availability matching for teachers.

A teacher with no recorded windows is always available. Once any window
exists the check becomes closed-world: the proposed slot must sit inside a
single "disponible" window on the same day. Two adjoining windows do not
combine to cover a slot.

Note the contrast with the workload guard, where missing data means a
ceiling of zero. Both defaults are intentional.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import time

from timetable_rules.core.config import get_settings
from timetable_rules.core.exceptions import MalformedInputError
from timetable_rules.schemas.availability import AvailabilityWindow
from timetable_rules.schemas.resources import Teacher
from timetable_rules.schemas.verdict import Verdict, Violation
from timetable_rules.services.intervals import contains
from timetable_rules.services.records import as_model
from timetable_rules.services.time_arithmetic import time_to_minutes

logger = logging.getLogger(__name__)


def _normalize_day(day: str) -> str:
    if not isinstance(day, str) or not day.strip():
        raise MalformedInputError(f"Day must be non-empty text, got {day!r}", value=day)
    return day.strip()


def find_matching_window(
    windows: Iterable[AvailabilityWindow | Mapping],
    day: str,
    start: str | time,
    end: str | time,
) -> AvailabilityWindow | None:
    available_kind = get_settings().available_kind
    day = _normalize_day(day)
    start_min = time_to_minutes(start)
    end_min = time_to_minutes(end)
    for raw in windows:
        window = as_model(AvailabilityWindow, raw)
        if window.day != day or window.kind != available_kind:
            continue
        if contains(window.start_minutes, window.end_minutes, start_min, end_min):
            return window
    return None


def check_availability(teacher: Teacher | Mapping, day: str, start: str | time, end: str | time) -> Verdict:
    teacher = as_model(Teacher, teacher)
    if not teacher.availabilities:
        # Validate the proposal even when there is nothing to match it against.
        _normalize_day(day)
        time_to_minutes(start)
        time_to_minutes(end)
        return Verdict.ok(open_world=True)

    window = find_matching_window(teacher.availabilities, day, start, end)
    if window is None:
        logger.debug("Teacher %s has no window covering %s %s-%s", teacher.id, day, start, end)
        return Verdict.reject(
            Violation.unavailable,
            f"No availability window covers {day} {start}-{end}",
            teacher_id=teacher.id,
        )
    return Verdict.ok(window=window.model_dump())


def is_available(teacher: Teacher | Mapping, day: str, start: str | time, end: str | time) -> bool:
    return check_availability(teacher, day, start, end).valid
