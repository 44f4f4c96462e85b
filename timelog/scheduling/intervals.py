# timelog/scheduling/intervals.py
"""
Value types for the daily scheduling core.

A day is modelled as the half-open minute range [0, 1440). Every logged
interval is expressed in minutes since midnight of that day, and all of the
interval arithmetic in this package works on those integers.
"""

import enum
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field

MINUTES_PER_DAY = 24 * 60


class Category(str, enum.Enum):
    """Utilization label attached to every time log."""
    SLEEP = "SLEEP"
    GOOD = "GOOD"
    NEUTRAL = "NEUTRAL"
    BAD = "BAD"


@dataclass(frozen=True)
class DayFrame:
    """Bounds of the calendar day used for gap search and layout."""
    start: int = 0
    end: int = MINUTES_PER_DAY

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, minute: int) -> bool:
        return self.start <= minute <= self.end


DAY_FRAME = DayFrame()


class Interval(BaseModel):
    """
    One logged span [start, end) with a category.

    start < end is not enforced on construction. Candidates are checked by
    the overlap validator, stored rows by the aggregation integrity check.
    """
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, le=MINUTES_PER_DAY)
    end: int = Field(ge=0, le=MINUTES_PER_DAY)
    category: Category
    description: str = ""
    id: Optional[str] = None

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, start: int, end: int) -> bool:
        # Half-open test: touching endpoints do not overlap.
        return start < self.end and self.start < end


class IntervalSet:
    """All persisted intervals of one user on one calendar day, keyed by id."""

    def __init__(self, user_id: Optional[str] = None, day: Optional[date] = None,
                 intervals: Optional[List[Interval]] = None):
        self.user_id = user_id
        self.day = day
        self._intervals: Dict[str, Interval] = {}
        for interval in intervals or []:
            self.add(interval)

    def add(self, interval: Interval) -> None:
        if interval.id is None:
            raise ValueError("Only persisted intervals (with an id) can be added to an IntervalSet")
        if interval.id in self._intervals:
            raise ValueError(f"Interval {interval.id} is already part of this set")
        self._intervals[interval.id] = interval

    def get(self, interval_id: str) -> Optional[Interval]:
        return self._intervals.get(interval_id)

    def __iter__(self) -> Iterator[Interval]:
        return iter(sorted(self._intervals.values(), key=lambda i: (i.start, i.end)))

    def __len__(self) -> int:
        return len(self._intervals)

    def __contains__(self, interval_id: object) -> bool:
        return interval_id in self._intervals

    def overlapping(self, start: int, end: int) -> List[Interval]:
        """Intervals intersecting [start, end), in start order."""
        return [interval for interval in self if interval.overlaps(start, end)]

    def boundaries(self) -> List[int]:
        """Every start and end point, ascending. Duplicates are kept."""
        points: List[int] = []
        for interval in self._intervals.values():
            points.extend((interval.start, interval.end))
        return sorted(points)

    def __repr__(self) -> str:
        return f"IntervalSet(user_id={self.user_id!r}, day={self.day!r}, size={len(self)})"
