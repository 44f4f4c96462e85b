# timelog/scheduling/aggregation.py
"""
Utilization aggregation for a single day.

Reduces a day's intervals to total minutes per category and presents them as
hours rounded half-up to two decimals. Before summing, the stored data is
checked for the invariants the rest of the system relies on; a breach raises
DataIntegrityError rather than producing silently wrong totals.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

import polars as pl

from timelog.scheduling.errors import DataIntegrityError
from timelog.scheduling.intervals import Category, IntervalSet

log = logging.getLogger(__name__)

_SCHEMA = {"id": pl.Utf8, "start": pl.Int64, "end": pl.Int64, "category": pl.Utf8}
_TWO_PLACES = Decimal("0.01")


def _to_frame(existing: IntervalSet) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "id": [str(i.id) for i in existing],
            "start": [i.start for i in existing],
            "end": [i.end for i in existing],
            "category": [i.category.value for i in existing],
        },
        schema=_SCHEMA,
    )


def log_violations(scope: str, violations: List[str]) -> None:
    for violation in violations:
        log.error(f"Data integrity violation ({scope}): {violation}")


def scan_integrity(existing: IntervalSet) -> List[str]:
    """
    Collect every interval with a non-positive duration and every interval
    overlapping an earlier one. Each violation is logged at ERROR and
    returned; nothing is raised.
    """
    df = _to_frame(existing)
    if df.is_empty():
        return []

    violations: List[str] = []

    bad_durations = df.filter(pl.col("end") <= pl.col("start"))
    for row in bad_durations.iter_rows(named=True):
        violations.append(f"time log {row['id']} has non-positive duration [{row['start']}, {row['end']})")

    # Sorted by start, an interval overlaps an earlier one iff it starts
    # before the furthest end seen so far.
    ordered = df.filter(pl.col("end") > pl.col("start")).sort(["start", "end"]).with_columns(
        pl.col("end").cum_max().shift(1).alias("prev_max_end"),
        pl.col("id").shift(1).alias("prev_id"),
    )
    overlapping = ordered.filter(pl.col("start") < pl.col("prev_max_end"))
    for row in overlapping.iter_rows(named=True):
        violations.append(
            f"time log {row['id']} starting at minute {row['start']} overlaps an earlier time log "
            f"(preceding entry {row['prev_id']})"
        )

    log_violations(f"user={existing.user_id} day={existing.day}", violations)
    return violations


def check_integrity(existing: IntervalSet) -> None:
    """Raise DataIntegrityError if `scan_integrity` finds anything."""
    violations = scan_integrity(existing)
    if violations:
        raise DataIntegrityError(violations)


def aggregate_minutes(existing: IntervalSet) -> Dict[Category, int]:
    """Total logged minutes per category; all four categories are present."""
    check_integrity(existing)

    totals: Dict[Category, int] = {category: 0 for category in Category}
    df = _to_frame(existing)
    if df.is_empty():
        return totals

    grouped = (
        df.with_columns((pl.col("end") - pl.col("start")).alias("minutes"))
        .group_by("category")
        .agg(pl.col("minutes").sum())
    )
    for row in grouped.iter_rows(named=True):
        totals[Category(row["category"])] = int(row["minutes"])
    return totals


def minutes_to_hours(minutes: int) -> float:
    """Minutes as hours, rounded half-up to two decimals."""
    hours = (Decimal(minutes) / Decimal(60)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return float(hours)


def aggregate_hours(existing: IntervalSet) -> Dict[Category, float]:
    return {category: minutes_to_hours(minutes) for category, minutes in aggregate_minutes(existing).items()}


def total_logged_minutes(totals: Dict[Category, int]) -> int:
    """Re-derive the day's logged minutes from per-category totals."""
    return sum(totals.values())
