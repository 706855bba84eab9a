from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Violation(str, Enum):
    inverted_range = "inverted_range"
    out_of_bounds = "out_of_bounds"
    too_long = "too_long"
    unavailable = "unavailable"
    incompatible_resource = "incompatible_resource"
    over_capacity = "over_capacity"
    conflict = "conflict"


class Verdict(BaseModel):
    """Outcome of a rule check. Truthy when the proposal is legal."""

    valid: bool
    violation: Violation | None = None
    message: str = ""
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls, **details: Any) -> "Verdict":
        return cls(valid=True, details=details)

    @classmethod
    def reject(cls, violation: Violation, message: str, **details: Any) -> "Verdict":
        return cls(valid=False, violation=violation, message=message, details=details)
