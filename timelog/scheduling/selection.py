# timelog/scheduling/selection.py
"""
Click-to-select flow for the range picker.

    Idle -> PointChosen -> Accepted(gap) | RejectedOccupied | RejectedTooSmall -> Idle

Nothing is kept between calls; each selection starts from Idle and ends in
one of the three outcomes.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from timelog.scheduling.errors import GapTooSmall, OccupiedSlot, SchedulingError
from timelog.scheduling.gaps import Gap, find_containing_gap
from timelog.scheduling.intervals import DAY_FRAME, DayFrame, IntervalSet

DEFAULT_MIN_SELECTION_MINUTES = 15


class SelectionState(str, enum.Enum):
    IDLE = "idle"
    POINT_CHOSEN = "point_chosen"
    ACCEPTED = "accepted"
    REJECTED_OCCUPIED = "rejected_occupied"
    REJECTED_TOO_SMALL = "rejected_too_small"


@dataclass(frozen=True)
class Selection:
    point: int
    state: SelectionState
    gap: Optional[Gap] = None
    error: Optional[SchedulingError] = None

    @property
    def accepted(self) -> bool:
        return self.state is SelectionState.ACCEPTED

    def raise_for_rejection(self) -> None:
        if self.error is not None:
            raise self.error


def select_point(
    point: int,
    existing: IntervalSet,
    minimum_minutes: int = DEFAULT_MIN_SELECTION_MINUTES,
    frame: DayFrame = DAY_FRAME,
) -> Selection:
    """
    Resolve a chosen minute into a free range, or the reason it cannot be used.

    A point on an interval, edges included, is occupied. Otherwise the gap
    around it comes from the gap finder and must be at least
    `minimum_minutes` wide. A point outside the frame raises InvalidRange.
    """
    # PointChosen
    for interval in existing:
        if interval.start <= point <= interval.end:
            return Selection(
                point=point,
                state=SelectionState.REJECTED_OCCUPIED,
                error=OccupiedSlot(point, interval),
            )

    gap = find_containing_gap(point, existing, frame)
    if gap.width < minimum_minutes:
        return Selection(
            point=point,
            state=SelectionState.REJECTED_TOO_SMALL,
            gap=gap,
            error=GapTooSmall(point, gap.start, gap.end, minimum_minutes),
        )
    return Selection(point=point, state=SelectionState.ACCEPTED, gap=gap)
