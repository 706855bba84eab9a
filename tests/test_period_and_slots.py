from datetime import date, datetime, timezone

import pytest

from timetable_rules.core.exceptions import MalformedInputError
from timetable_rules.schemas.verdict import Violation
from timetable_rules.services.period import check_period, validate_period
from timetable_rules.services.time_slot import (
    check_time_slot,
    generate_time_slots,
    is_valid_duration,
    is_valid_weekly_volume,
    validate_time_slot,
)


def test_period_accepts_ordered_range_within_a_year():
    assert validate_period("2024-09-01", "2025-06-30")
    assert validate_period(date(2024, 9, 1), datetime(2024, 9, 1, 8, 0))
    assert validate_period("2024-01-01T00:00:00Z", "2024-12-31T00:00:00Z")


def test_period_boundaries():
    # 2025 is not a leap year: exactly 365 days is allowed, one more second is not.
    assert validate_period("2025-01-01T00:00:00", "2026-01-01T00:00:00")
    verdict = check_period("2025-01-01T00:00:00", "2026-01-01T00:00:01")
    assert not verdict
    assert verdict.violation == Violation.too_long

    inverted = check_period("2025-02-01", "2025-01-01")
    assert inverted.violation == Violation.inverted_range
    assert check_period("2025-01-01", "2025-01-01").violation == Violation.inverted_range


def test_period_custom_span():
    assert not check_period("2025-01-01", "2025-03-01", max_days=30)


def test_period_rejects_unparsable_input():
    with pytest.raises(MalformedInputError):
        validate_period("not a date", "2025-01-01")
    with pytest.raises(MalformedInputError):
        validate_period(None, "2025-01-01")
    with pytest.raises(MalformedInputError):
        validate_period(datetime(2025, 1, 1, tzinfo=timezone.utc), datetime(2025, 2, 1))


def test_time_slot_examples():
    assert validate_time_slot("08:00", "10:00")
    assert not validate_time_slot("08:00", "08:10")
    assert not validate_time_slot("23:00", "01:00")


def test_time_slot_bounds_are_inclusive_and_overridable():
    assert validate_time_slot("08:00", "08:30")
    assert validate_time_slot("08:00", "12:00")
    assert not validate_time_slot("08:00", "12:01")
    assert not validate_time_slot("08:00", "10:30", max_duration=120)
    assert validate_time_slot("08:00", "08:15", min_duration=15)


def test_time_slot_reasons():
    assert check_time_slot("10:00", "10:00").violation == Violation.inverted_range
    too_short = check_time_slot("08:00", "08:10")
    assert too_short.violation == Violation.out_of_bounds
    assert too_short.details["duration"] == 10

    assert check_time_slot("08:00", "08:47").valid
    assert check_time_slot("08:00", "08:47", step_minutes=5).violation == Violation.out_of_bounds


def test_time_slot_rejects_malformed_time():
    with pytest.raises(MalformedInputError):
        validate_time_slot("8h", "10:00")


def test_duration_and_weekly_volume():
    assert is_valid_duration(55)
    assert not is_valid_duration(57)
    assert not is_valid_duration(25)
    assert not is_valid_duration(245)
    assert not is_valid_duration("60")

    assert is_valid_weekly_volume(30)
    assert is_valid_weekly_volume(600)
    assert not is_valid_weekly_volume(45)
    assert not is_valid_weekly_volume(630)


def test_generate_time_slots():
    slots = generate_time_slots("08:00", "10:30", 60)
    assert [(slot.start_time, slot.end_time) for slot in slots] == [("08:00", "09:00"), ("09:00", "10:00")]
    assert len(generate_time_slots()) == 10
    assert generate_time_slots("08:00", "08:30", 60) == []
