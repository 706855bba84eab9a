from functools import lru_cache
import json

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ROOM_REQUIREMENTS: dict[str, list[str]] = {
    "tp": ["laboratoire", "informatique", "atelier"],
    "atelier": ["atelier", "arts", "musique"],
    "cours_magistral": ["standard", "amphitheatre"],
    "td": ["standard"],
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TIMETABLE_RULES_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    min_slot_minutes: int = 30
    max_slot_minutes: int = 240
    max_period_days: int = 365

    duration_step_minutes: int = 5
    weekly_volume_min_minutes: int = 30
    weekly_volume_max_minutes: int = 600
    weekly_volume_step_minutes: int = 30

    available_kind: str = "disponible"
    default_room_category: str = "standard"
    room_requirements: dict[str, list[str]] = DEFAULT_ROOM_REQUIREMENTS

    @field_validator("room_requirements", mode="before")
    @classmethod
    def parse_room_requirements(cls, value: str | dict) -> dict:
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                return dict(DEFAULT_ROOM_REQUIREMENTS)
            try:
                parsed = json.loads(stripped)
            except json.JSONDecodeError as exc:
                raise ValueError("room_requirements must be a JSON object") from exc
            if not isinstance(parsed, dict):
                raise ValueError("room_requirements must be a JSON object")
            return parsed
        return value

    @field_validator("min_slot_minutes", "max_slot_minutes", "max_period_days")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Limits must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
