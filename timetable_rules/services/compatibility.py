from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from timetable_rules.core.config import get_settings
from timetable_rules.core.exceptions import ConfigurationError
from timetable_rules.schemas.resources import Activity, Room
from timetable_rules.schemas.verdict import Verdict, Violation
from timetable_rules.services.records import as_model

logger = logging.getLogger(__name__)


class RoomRequirements:
    """Lookup table of acceptable room categories per activity category.

    Unknown activity categories fall back to the default category set.
    """

    def __init__(self, table: Mapping[str, Iterable[str]], default: Iterable[str] = ("standard",)) -> None:
        self._table: dict[str, frozenset[str]] = {}
        for activity_category, room_categories in table.items():
            if isinstance(room_categories, str):
                self._fail(f"Room categories for {activity_category!r} must be a list, not a string")
            categories = frozenset(category.strip() for category in room_categories if category.strip())
            if not categories:
                self._fail(f"Activity category {activity_category!r} accepts no room category")
            self._table[activity_category.strip()] = categories
        self._default = frozenset(default)
        if not self._default:
            self._fail("Default room category set cannot be empty")

    @staticmethod
    def _fail(message: str) -> None:
        logger.warning("Invalid room requirement table: %s", message)
        raise ConfigurationError(message)

    @classmethod
    def from_settings(cls) -> "RoomRequirements":
        settings = get_settings()
        return cls(settings.room_requirements, default=(settings.default_room_category,))

    def required_categories(self, activity_category: str) -> frozenset[str]:
        return self._table.get(activity_category.strip(), self._default)

    def extended(self, table: Mapping[str, Iterable[str]]) -> "RoomRequirements":
        """Return a copy with extra or overriding institution-specific entries."""
        merged: dict[str, Iterable[str]] = dict(self._table)
        merged.update(table)
        return RoomRequirements(merged, default=self._default)

    def as_dict(self) -> dict[str, list[str]]:
        return {key: sorted(value) for key, value in self._table.items()}


def check_resource_compatibility(
    room: Room | Mapping,
    activity: Activity | Mapping,
    requirements: RoomRequirements | None = None,
) -> Verdict:
    room = as_model(Room, room)
    activity = as_model(Activity, activity)
    requirements = requirements or RoomRequirements.from_settings()

    if room.capacity < activity.headcount:
        logger.debug("Room %s capacity %d < headcount %d", room.id, room.capacity, activity.headcount)
        return Verdict.reject(
            Violation.incompatible_resource,
            f"Room capacity ({room.capacity}) < expected headcount ({activity.headcount})",
            reason="capacity",
            capacity=room.capacity,
            headcount=activity.headcount,
        )

    accepted = requirements.required_categories(activity.category)
    if room.category not in accepted:
        logger.debug("Room %s category %s not in %s", room.id, room.category, sorted(accepted))
        return Verdict.reject(
            Violation.incompatible_resource,
            f"{activity.category} sessions need a room of type {', '.join(sorted(accepted))}",
            reason="category",
            room_category=room.category,
            accepted=sorted(accepted),
        )
    return Verdict.ok()


def is_resource_compatible(
    room: Room | Mapping,
    activity: Activity | Mapping,
    requirements: RoomRequirements | None = None,
) -> bool:
    return check_resource_compatibility(room, activity, requirements).valid
