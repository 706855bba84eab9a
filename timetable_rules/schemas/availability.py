from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, Field, field_validator

from timetable_rules.schemas.time_slot import TimeSlot


class AvailabilityKind(str, Enum):
    disponible = "disponible"
    indisponible = "indisponible"
    preference = "preference"


class AvailabilityWindow(TimeSlot):
    day: str = Field(validation_alias=AliasChoices("day", "jour_semaine"), min_length=1)
    kind: str = Field(default=AvailabilityKind.disponible.value, validation_alias=AliasChoices("kind", "type"))

    @field_validator("day", "kind")
    @classmethod
    def strip_value(cls, value: str) -> str:
        return value.strip()
