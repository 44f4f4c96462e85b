"""Daily interval scheduling and utilization aggregation."""

from timelog.scheduling.aggregation import (
    aggregate_hours,
    aggregate_minutes,
    check_integrity,
    minutes_to_hours,
    total_logged_minutes,
)
from timelog.scheduling.clock import at_minute, format_clock, minute_of_day, parse_clock
from timelog.scheduling.errors import (
    DataIntegrityError,
    GapTooSmall,
    InvalidRange,
    OccupiedSlot,
    Overlap,
    SchedulingError,
)
from timelog.scheduling.gaps import Gap, find_containing_gap
from timelog.scheduling.intervals import DAY_FRAME, MINUTES_PER_DAY, Category, DayFrame, Interval, IntervalSet
from timelog.scheduling.layout import LayoutItem, build_layout
from timelog.scheduling.selection import Selection, SelectionState, select_point
from timelog.scheduling.validator import Verdict, validate

__all__ = [
    "Category",
    "DAY_FRAME",
    "DataIntegrityError",
    "DayFrame",
    "Gap",
    "GapTooSmall",
    "Interval",
    "IntervalSet",
    "InvalidRange",
    "LayoutItem",
    "MINUTES_PER_DAY",
    "OccupiedSlot",
    "Overlap",
    "SchedulingError",
    "Selection",
    "SelectionState",
    "Verdict",
    "aggregate_hours",
    "aggregate_minutes",
    "at_minute",
    "build_layout",
    "check_integrity",
    "find_containing_gap",
    "format_clock",
    "minute_of_day",
    "minutes_to_hours",
    "parse_clock",
    "select_point",
    "total_logged_minutes",
    "validate",
]
