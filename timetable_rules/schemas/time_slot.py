from __future__ import annotations

from datetime import time

from pydantic import AliasChoices, BaseModel, Field, field_validator

from timetable_rules.services.intervals import Interval
from timetable_rules.services.time_arithmetic import minutes_to_time, time_to_minutes


class TimeSlot(BaseModel):
    start_time: str = Field(validation_alias=AliasChoices("start_time", "start", "heure_debut"))
    end_time: str = Field(validation_alias=AliasChoices("end_time", "end", "heure_fin"))

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "frozen": True,
    }

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def normalize_time(cls, value: str | time) -> str:
        # Raises InvalidTimeFormat, which pydantic reports as a ValidationError.
        return minutes_to_time(time_to_minutes(value))

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)

    @property
    def duration(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def interval(self) -> Interval:
        return Interval(self.start_minutes, self.end_minutes)


class ScheduledEntry(TimeSlot):
    """An already committed booking, used as context for conflict checks."""

    id: str | None = Field(default=None, max_length=36)
    day: str = Field(validation_alias=AliasChoices("day", "jour_semaine"), min_length=1)
    teacher_id: str | None = Field(default=None, validation_alias=AliasChoices("teacher_id", "enseignant_id"))
    room_id: str | None = Field(default=None, validation_alias=AliasChoices("room_id", "salle_id"))
    class_id: str | None = Field(default=None, validation_alias=AliasChoices("class_id", "classe_id"))

    @field_validator("day")
    @classmethod
    def strip_day(cls, value: str) -> str:
        return value.strip()
