"""Workload ceiling checks.

An unset ceiling counts as 0, so a teacher without a contract cannot take
any additional hours. This is the opposite of the availability default and
is intentional.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum

from timetable_rules.core.exceptions import ConfigurationError
from timetable_rules.schemas.resources import Teacher, WorkloadState
from timetable_rules.schemas.verdict import Verdict, Violation
from timetable_rules.services.records import as_model

logger = logging.getLogger(__name__)


class ConstraintHardness(str, Enum):
    dure = "dure"
    souple = "souple"


class WorkloadPolicy(ABC):
    name = "base"

    @abstractmethod
    def allows(self, current: float, additional: float, ceiling: float) -> bool:
        """Return True when the projected load is acceptable."""


class HardCapPolicy(WorkloadPolicy):
    name = "hard"

    def allows(self, current: float, additional: float, ceiling: float) -> bool:
        return current + additional <= ceiling


class SoftCapPolicy(WorkloadPolicy):
    """Lets the load exceed the ceiling by a fixed number of hours."""

    name = "soft"

    def __init__(self, tolerance_hours: float) -> None:
        if tolerance_hours < 0:
            logger.warning("Rejected soft workload policy with negative tolerance %s", tolerance_hours)
            raise ConfigurationError("tolerance_hours cannot be negative")
        self.tolerance_hours = tolerance_hours

    def allows(self, current: float, additional: float, ceiling: float) -> bool:
        return current + additional <= ceiling + self.tolerance_hours


def policy_for(hardness: ConstraintHardness | str, tolerance_hours: float = 0) -> WorkloadPolicy:
    hardness = ConstraintHardness(hardness)
    if hardness is ConstraintHardness.dure:
        return HardCapPolicy()
    return SoftCapPolicy(tolerance_hours)


def _state(subject: Teacher | WorkloadState | Mapping) -> WorkloadState:
    if isinstance(subject, WorkloadState):
        return subject
    return WorkloadState.from_teacher(as_model(Teacher, subject))


def remaining_hours(subject: Teacher | WorkloadState | Mapping) -> float:
    state = _state(subject)
    return state.ceiling_hours - state.current_hours


def check_workload(
    subject: Teacher | WorkloadState | Mapping,
    additional_hours: float = 0,
    policy: WorkloadPolicy | None = None,
) -> Verdict:
    state = _state(subject)
    policy = policy or HardCapPolicy()
    if policy.allows(state.current_hours, additional_hours, state.ceiling_hours):
        return Verdict.ok(projected_hours=state.current_hours + additional_hours)

    logger.debug(
        "Workload %s + %s exceeds ceiling %s under %s policy",
        state.current_hours,
        additional_hours,
        state.ceiling_hours,
        policy.name,
    )
    return Verdict.reject(
        Violation.over_capacity,
        f"Workload would reach {state.current_hours + additional_hours}h, ceiling is {state.ceiling_hours}h",
        current_hours=state.current_hours,
        additional_hours=additional_hours,
        ceiling_hours=state.ceiling_hours,
        policy=policy.name,
    )


def is_workload_within_limit(
    subject: Teacher | WorkloadState | Mapping,
    additional_hours: float = 0,
    policy: WorkloadPolicy | None = None,
) -> bool:
    return check_workload(subject, additional_hours, policy).valid
