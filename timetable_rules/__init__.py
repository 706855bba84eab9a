from timetable_rules.core.exceptions import AppError, ConfigurationError, InvalidTimeFormat, MalformedInputError
from timetable_rules.schemas.verdict import Verdict, Violation
from timetable_rules.services.availability import check_availability, is_available
from timetable_rules.services.compatibility import RoomRequirements, check_resource_compatibility, is_resource_compatible
from timetable_rules.services.conflict_service import check_conflict, find_conflict, has_conflict
from timetable_rules.services.intervals import contains, overlaps
from timetable_rules.services.period import check_period, validate_period
from timetable_rules.services.time_arithmetic import time_to_minutes
from timetable_rules.services.time_slot import check_time_slot, validate_time_slot
from timetable_rules.services.workload import check_workload, is_workload_within_limit

__all__ = [
    "AppError",
    "ConfigurationError",
    "InvalidTimeFormat",
    "MalformedInputError",
    "RoomRequirements",
    "Verdict",
    "Violation",
    "check_availability",
    "check_conflict",
    "check_period",
    "check_resource_compatibility",
    "check_time_slot",
    "check_workload",
    "contains",
    "find_conflict",
    "has_conflict",
    "is_available",
    "is_resource_compatible",
    "is_workload_within_limit",
    "overlaps",
    "time_to_minutes",
    "validate_period",
    "validate_time_slot",
]
