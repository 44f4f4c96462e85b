# timelog/scheduling/layout.py
"""Proportional timeline layout: each interval as a left offset and a width, in fractions of the day."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from timelog.scheduling.aggregation import scan_integrity
from timelog.scheduling.intervals import DAY_FRAME, Category, DayFrame, IntervalSet

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutItem:
    id: Optional[str]
    left_fraction: float
    width_fraction: float
    category: Category


def build_layout(existing: IntervalSet, frame: DayFrame = DAY_FRAME) -> List[LayoutItem]:
    """
    Lay out every interval relative to the day frame.

    Integrity breaches are logged at ERROR but never reject the day. Items
    with a non-positive width are skipped with a warning.
    """
    scan_integrity(existing)
    length = frame.length
    items: List[LayoutItem] = []
    for interval in existing:
        width = interval.end - interval.start
        if width <= 0:
            log.warning(
                f"Skipping time log {interval.id} in timeline layout: non-positive width "
                f"[{interval.start}, {interval.end})"
            )
            continue
        items.append(
            LayoutItem(
                id=interval.id,
                left_fraction=(interval.start - frame.start) / length,
                width_fraction=width / length,
                category=interval.category,
            )
        )
    return items
