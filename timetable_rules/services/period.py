from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from timetable_rules.core.config import get_settings
from timetable_rules.core.exceptions import MalformedInputError
from timetable_rules.schemas.verdict import Verdict, Violation

logger = logging.getLogger(__name__)

Instant = datetime | date | str


def parse_instant(value: Instant) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise MalformedInputError(f"Unparsable date-time {value!r}", value=value) from exc
    raise MalformedInputError(f"Unsupported date-time value {value!r}", value=value)


def check_period(start: Instant, end: Instant, *, max_days: int | None = None) -> Verdict:
    start_at = parse_instant(start)
    end_at = parse_instant(end)
    if (start_at.tzinfo is None) != (end_at.tzinfo is None):
        raise MalformedInputError(
            "Cannot compare a timezone-aware instant with a naive one",
            value=(start, end),
        )

    if start_at >= end_at:
        logger.debug("Rejected period %s -> %s: end does not follow start", start_at, end_at)
        return Verdict.reject(Violation.inverted_range, "Period end must be after its start")

    limit = timedelta(days=max_days if max_days is not None else get_settings().max_period_days)
    span = end_at - start_at
    if span > limit:
        logger.debug("Rejected period %s -> %s: span %s exceeds %s", start_at, end_at, span, limit)
        return Verdict.reject(
            Violation.too_long,
            f"Period may not span more than {limit.days} days",
            span_days=span / timedelta(days=1),
        )
    return Verdict.ok()


def validate_period(start: Instant, end: Instant) -> bool:
    return check_period(start, end).valid
