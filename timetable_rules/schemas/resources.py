from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field, field_validator

from timetable_rules.schemas.availability import AvailabilityWindow


class Teacher(BaseModel):
    """A schedulable subject: availability windows plus workload figures.

    Hours left unset default to 0, so a teacher without a contract ceiling
    cannot take on any additional hours.
    """

    id: str | None = Field(default=None, max_length=36)
    availabilities: list[AvailabilityWindow] = Field(default_factory=list, validation_alias=AliasChoices("availabilities", "disponibilites"))
    current_hours: float = Field(default=0, validation_alias=AliasChoices("current_hours", "heures_actuelles"), ge=0)
    contract_hours: float = Field(default=0, validation_alias=AliasChoices("contract_hours", "heures_contractuelles"), ge=0)

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @field_validator("availabilities", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("current_hours", "contract_hours", mode="before")
    @classmethod
    def none_as_zero(cls, value):
        return 0 if value is None else value


class Room(BaseModel):
    id: str | None = Field(default=None, max_length=36)
    capacity: int = Field(validation_alias=AliasChoices("capacity", "capacite"), ge=0)
    category: str = Field(validation_alias=AliasChoices("category", "type_salle"), min_length=1)

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @field_validator("category")
    @classmethod
    def normalize_category(cls, value: str) -> str:
        return value.strip()


class Activity(BaseModel):
    id: str | None = Field(default=None, max_length=36)
    headcount: int = Field(default=0, validation_alias=AliasChoices("headcount", "effectif_estime"), ge=0)
    category: str = Field(validation_alias=AliasChoices("category", "type_cours"), min_length=1)

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @field_validator("category")
    @classmethod
    def normalize_category(cls, value: str) -> str:
        return value.strip()

    @field_validator("headcount", mode="before")
    @classmethod
    def none_as_zero(cls, value):
        return 0 if value is None else value


class WorkloadState(BaseModel):
    current_hours: float = Field(default=0, ge=0)
    ceiling_hours: float = Field(default=0, ge=0)

    @classmethod
    def from_teacher(cls, teacher: Teacher) -> "WorkloadState":
        return cls(current_hours=teacher.current_hours, ceiling_hours=teacher.contract_hours)
