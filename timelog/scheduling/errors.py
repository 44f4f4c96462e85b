# timelog/scheduling/errors.py
"""Outcomes the scheduling core reports back to its callers."""

from typing import List, Sequence

from timelog.scheduling.intervals import Interval


class SchedulingError(Exception):
    """Base class for every rejection raised by the scheduling core."""
    code = "scheduling_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRange(SchedulingError):
    """Start is not strictly before end, or a point lies outside the day."""
    code = "invalid_range"

    def __init__(self, start: int, end: int, message: str = ""):
        super().__init__(message or f"Start ({start}) must be strictly before end ({end})")
        self.start = start
        self.end = end


class Overlap(SchedulingError):
    """A candidate intersects at least one existing interval."""
    code = "overlap"

    def __init__(self, start: int, end: int, conflicts: Sequence[Interval]):
        ids = ", ".join(str(c.id) for c in conflicts)
        super().__init__(f"Range [{start}, {end}) overlaps existing time log(s): {ids}")
        self.start = start
        self.end = end
        self.conflicts: List[Interval] = list(conflicts)


class OccupiedSlot(SchedulingError):
    """A selected point falls on an existing interval."""
    code = "occupied_slot"

    def __init__(self, point: int, interval: Interval):
        super().__init__(f"Minute {point} is already covered by time log {interval.id}")
        self.point = point
        self.interval = interval


class GapTooSmall(SchedulingError):
    """The free gap around a selected point is narrower than the configured minimum."""
    code = "gap_too_small"

    def __init__(self, point: int, start: int, end: int, minimum: int):
        super().__init__(
            f"Free range [{start}, {end}) around minute {point} is shorter than {minimum} minutes"
        )
        self.point = point
        self.start = start
        self.end = end
        self.minimum = minimum


class DataIntegrityError(SchedulingError):
    """Stored intervals break the non-overlap or positive-duration invariant."""
    code = "data_integrity"

    def __init__(self, violations: Sequence[str]):
        super().__init__("Time log data integrity violated: " + "; ".join(violations))
        self.violations: List[str] = list(violations)
