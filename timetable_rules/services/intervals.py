from __future__ import annotations

from dataclasses import dataclass


def overlaps(start1: int, end1: int, start2: int, end2: int) -> bool:
    """Open overlap: intervals that only touch at an endpoint do not overlap."""
    return start1 < end2 and end1 > start2


def contains(outer_start: int, outer_end: int, inner_start: int, inner_end: int) -> bool:
    """Closed containment: shared boundaries still count as contained."""
    return inner_start >= outer_start and inner_end <= outer_end


@dataclass(frozen=True)
class Interval:
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "Interval") -> bool:
        return overlaps(self.start, self.end, other.start, other.end)

    def contains(self, other: "Interval") -> bool:
        return contains(self.start, self.end, other.start, other.end)
