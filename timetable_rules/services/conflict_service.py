from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Dict, List

from timetable_rules.schemas.conflict import ConflictDetail, ConflictReport, ResolutionAction
from timetable_rules.schemas.time_slot import ScheduledEntry
from timetable_rules.schemas.verdict import Verdict, Violation
from timetable_rules.services.records import as_model

logger = logging.getLogger(__name__)


def find_conflict(
    existing_entries: Iterable[ScheduledEntry | Mapping],
    candidate: ScheduledEntry | Mapping,
) -> ScheduledEntry | None:
    """Return the first existing entry on the candidate's day that overlaps it."""
    candidate = as_model(ScheduledEntry, candidate)
    window = candidate.interval
    for raw in existing_entries:
        existing = as_model(ScheduledEntry, raw)
        if existing.day == candidate.day and existing.interval.overlaps(window):
            return existing
    return None


def check_conflict(
    existing_entries: Iterable[ScheduledEntry | Mapping],
    candidate: ScheduledEntry | Mapping,
) -> Verdict:
    candidate = as_model(ScheduledEntry, candidate)
    clash = find_conflict(existing_entries, candidate)
    if clash is None:
        return Verdict.ok()
    logger.debug(
        "Candidate %s %s-%s overlaps entry %s %s-%s",
        candidate.day, candidate.start_time, candidate.end_time,
        clash.id, clash.start_time, clash.end_time,
    )
    return Verdict.reject(
        Violation.conflict,
        f"Overlaps {clash.day} {clash.start_time}-{clash.end_time}",
        entry=clash.model_dump(),
    )


def has_conflict(
    existing_entries: Iterable[ScheduledEntry | Mapping],
    candidate: ScheduledEntry | Mapping,
) -> bool:
    """True means the candidate must be rejected."""
    return find_conflict(existing_entries, candidate) is not None


class ConflictService:
    """Audits a whole set of committed entries for pairwise overlaps."""

    def __init__(self, entries: Iterable[ScheduledEntry | Mapping]):
        self.entries: List[ScheduledEntry] = []
        for index, raw in enumerate(entries):
            entry = as_model(ScheduledEntry, raw)
            if entry.id is None:
                entry = entry.model_copy(update={"id": f"entry-{index}"})
            self.entries.append(entry)

    def detect_conflicts(self) -> ConflictReport:
        conflicts: List[ConflictDetail] = []

        entries_by_day: Dict[str, List[ScheduledEntry]] = defaultdict(list)
        for entry in self.entries:
            entries_by_day[entry.day].append(entry)

        for day, day_entries in entries_by_day.items():
            n = len(day_entries)
            for i in range(n):
                e1 = day_entries[i]
                for j in range(i + 1, n):
                    e2 = day_entries[j]
                    if not e1.interval.overlaps(e2.interval):
                        continue

                    window = f"{day} {max(e1.start_time, e2.start_time)}-{min(e1.end_time, e2.end_time)}"
                    if e1.room_id is not None and e1.room_id == e2.room_id:
                        conflicts.append(ConflictDetail(
                            id=f"room-{e1.id}-{e2.id}",
                            conflict_type="room_conflict",
                            day=day,
                            description=f"Room {e1.room_id} double-booked on {window}",
                            severity="hard",
                            affected_entries=[e1.id, e2.id],
                        ))
                    if e1.teacher_id is not None and e1.teacher_id == e2.teacher_id:
                        conflicts.append(ConflictDetail(
                            id=f"teacher-{e1.id}-{e2.id}",
                            conflict_type="teacher_conflict",
                            day=day,
                            description=f"Teacher {e1.teacher_id} double-booked on {window}",
                            severity="hard",
                            affected_entries=[e1.id, e2.id],
                        ))
                    if e1.class_id is not None and e1.class_id == e2.class_id:
                        conflicts.append(ConflictDetail(
                            id=f"class-{e1.id}-{e2.id}",
                            conflict_type="class_conflict",
                            day=day,
                            description=f"Class {e1.class_id} double-booked on {window}",
                            severity="hard",
                            affected_entries=[e1.id, e2.id],
                        ))

        if conflicts:
            logger.info("Detected %d conflict(s) across %d entries", len(conflicts), len(self.entries))

        resolutions: List[ResolutionAction] = []
        for conflict in conflicts:
            resolutions.extend(self.generate_resolutions(conflict))
        return ConflictReport(conflicts=conflicts, suggested_resolutions=resolutions)

    def generate_resolutions(self, conflict: ConflictDetail) -> List[ResolutionAction]:
        resolutions = []
        target = conflict.affected_entries[-1]
        if conflict.conflict_type == "room_conflict":
            resolutions.append(ResolutionAction(
                action_type="change_room",
                description="Book a free room for one of the clashing entries",
                target_entry_id=target,
                parameters={"day": conflict.day},
            ))
        if conflict.conflict_type == "teacher_conflict":
            resolutions.append(ResolutionAction(
                action_type="change_teacher",
                description="Assign another teacher to one of the clashing entries",
                target_entry_id=target,
                parameters={"day": conflict.day},
            ))
        if conflict.conflict_type in ("teacher_conflict", "class_conflict"):
            resolutions.append(ResolutionAction(
                action_type="move_slot",
                description="Move to a different time slot",
                target_entry_id=target,
                parameters={"day": conflict.day},
            ))
        return resolutions
