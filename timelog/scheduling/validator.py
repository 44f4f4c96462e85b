# timelog/scheduling/validator.py
"""
Overlap validator.

Decides whether a proposed [start, end) can be logged against the intervals
already stored for the same user and day. Pure: nothing is mutated.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from timelog.scheduling.errors import InvalidRange, Overlap, SchedulingError
from timelog.scheduling.intervals import Interval, IntervalSet


@dataclass(frozen=True)
class Verdict:
    """Accepted, or rejected with the reason and any conflicting intervals."""
    accepted: bool
    reason: Optional[SchedulingError] = None
    conflicts: List[Interval] = field(default_factory=list)

    def raise_for_rejection(self) -> None:
        if not self.accepted and self.reason is not None:
            raise self.reason


ACCEPTED = Verdict(accepted=True)


def validate(candidate: Interval, existing: IntervalSet) -> Verdict:
    """
    Check a candidate interval against a day's interval set.

    Args:
        candidate: The proposed interval (usually without an id yet).
        existing: Persisted intervals for the same user and day.

    Returns:
        ACCEPTED when nothing overlaps; otherwise a rejected Verdict carrying
        InvalidRange or Overlap. Overlap lists every conflicting interval.
    """
    if candidate.start >= candidate.end:
        return Verdict(accepted=False, reason=InvalidRange(candidate.start, candidate.end))

    conflicts = existing.overlapping(candidate.start, candidate.end)
    if conflicts:
        return Verdict(
            accepted=False,
            reason=Overlap(candidate.start, candidate.end, conflicts),
            conflicts=conflicts,
        )
    return ACCEPTED
