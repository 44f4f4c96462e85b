"""Daily time logging service: non-overlapping intervals, utilization totals and timeline layout."""

__version__ = "0.1.0"
