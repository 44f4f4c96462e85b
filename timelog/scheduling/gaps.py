# timelog/scheduling/gaps.py
"""Gap finder: the widest free range of the day around a chosen minute."""

from dataclasses import dataclass

from timelog.scheduling.errors import InvalidRange
from timelog.scheduling.intervals import DAY_FRAME, DayFrame, IntervalSet


@dataclass(frozen=True)
class Gap:
    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.width <= 0


def find_containing_gap(point: int, existing: IntervalSet, frame: DayFrame = DAY_FRAME) -> Gap:
    """
    Return the largest boundary-to-boundary range that contains `point`.

    Boundaries are every interval start and end plus both frame edges,
    sorted ascending with duplicates kept. A consecutive pair qualifies when
    b[i] <= point <= b[i+1]; the widest qualifying pair wins and ties go to
    the earliest start. A zero-width result means no usable gap.

    Callers must not pass a point lying inside an existing interval; see
    `timelog.scheduling.selection` for the policy that guards this.
    """
    if not frame.contains(point):
        raise InvalidRange(point, point, f"Minute {point} is outside the day [{frame.start}, {frame.end}]")

    boundaries = sorted([frame.start, *existing.boundaries(), frame.end])

    best = None
    for lower, upper in zip(boundaries, boundaries[1:]):
        if lower <= point <= upper:
            # Strict comparison keeps the earliest gap on ties.
            if best is None or (upper - lower) > best.width:
                best = Gap(lower, upper)

    # Both frame edges are boundaries, so some pair always contains the point.
    return best
