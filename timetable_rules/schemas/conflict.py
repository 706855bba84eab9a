from pydantic import BaseModel
from typing import Literal, List

class ConflictDetail(BaseModel):
    id: str
    conflict_type: Literal[
        "room_conflict",
        "teacher_conflict",
        "class_conflict",
    ]
    day: str
    description: str
    severity: Literal["hard", "soft"]
    affected_entries: List[str]  # ScheduledEntry ids involved

class ResolutionAction(BaseModel):
    action_type: Literal["move_slot", "change_room", "change_teacher"]
    description: str
    target_entry_id: str
    parameters: dict  # e.g. {"day": "lundi"}

class ConflictReport(BaseModel):
    conflicts: List[ConflictDetail]
    suggested_resolutions: List[ResolutionAction]

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)
