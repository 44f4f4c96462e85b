from datetime import date
from fastapi import APIRouter, Path as FastAPIPath, Query

from timelog import schemas
from timelog.auth import CurrentUserDep
from timelog.api_v1.deps import RepositoryDep
from timelog.api_v1.endpoints.time_logs import DATE_PATTERN, parse_date_string
from timelog.core.settings import settings
from timelog.scheduling.aggregation import aggregate_minutes, minutes_to_hours, total_logged_minutes
from timelog.scheduling.clock import format_clock
from timelog.scheduling.intervals import MINUTES_PER_DAY
from timelog.scheduling.layout import build_layout
from timelog.scheduling.selection import select_point

router = APIRouter()

def _day_path():
    return FastAPIPath(..., description="Date in YYYY-MM-DD format.", pattern=DATE_PATTERN)

@router.get("/{date_string}/utilization", response_model=schemas.UtilizationSummary)
async def read_day_utilization(
    repo: RepositoryDep,
    current_user: CurrentUserDep,
    date_string: str = _day_path()
):
    """Hours and minutes logged per utilization category for a day."""
    target_date = parse_date_string(date_string)
    intervals = await repo.load_interval_set(current_user.id, target_date)
    minutes = aggregate_minutes(intervals)
    total = total_logged_minutes(minutes)
    return schemas.UtilizationSummary(
        date=target_date,
        minutes=minutes,
        hours={category: minutes_to_hours(value) for category, value in minutes.items()},
        total_minutes=total,
        total_hours=minutes_to_hours(total),
    )

@router.get("/{date_string}/timeline", response_model=schemas.DayTimeline)
async def read_day_timeline(
    repo: RepositoryDep,
    current_user: CurrentUserDep,
    date_string: str = _day_path()
):
    """Position and width of every time log as fractions of the day."""
    target_date = parse_date_string(date_string)
    intervals = await repo.load_interval_set(current_user.id, target_date)
    items = [
        schemas.TimelineItem(
            id=item.id,
            left_fraction=item.left_fraction,
            width_fraction=item.width_fraction,
            category=item.category,
        )
        for item in build_layout(intervals)
    ]
    return schemas.DayTimeline(date=target_date, items=items)

@router.get("/{date_string}/selection", response_model=schemas.SelectionResponse)
async def read_day_selection(
    repo: RepositoryDep,
    current_user: CurrentUserDep,
    date_string: str = _day_path(),
    minute: int = Query(..., ge=0, le=MINUTES_PER_DAY, description="Chosen minute of the day.")
):
    """
    Resolve a click on the range picker into the free range around it.
    A click on an existing log is rejected with 409, a free range shorter than
    MIN_SELECTION_MINUTES with 422.
    """
    target_date = parse_date_string(date_string)
    intervals = await repo.load_interval_set(current_user.id, target_date)
    selection = select_point(minute, intervals, minimum_minutes=settings.MIN_SELECTION_MINUTES)
    selection.raise_for_rejection()
    return schemas.SelectionResponse(
        date=target_date,
        minute=minute,
        state=selection.state.value,
        start_time=format_clock(selection.gap.start),
        end_time=format_clock(selection.gap.end),
        width_minutes=selection.gap.width,
    )
