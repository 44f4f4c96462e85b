import uuid
import logging
from typing import List
from datetime import date
from fastapi import APIRouter, HTTPException, Query, status

from timelog import schemas
from timelog.auth import CurrentUserDep
from timelog.api_v1.deps import RepositoryDep
from timelog.scheduling.clock import format_clock
from timelog.scheduling.intervals import Interval

router = APIRouter()
logger = logging.getLogger(__name__)

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

def parse_date_string(date_string: str) -> date:
    try:
        return date.fromisoformat(date_string)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date format. Please use YYYY-MM-DD."
        )

@router.post("", response_model=schemas.TimeLog, status_code=status.HTTP_201_CREATED)
async def create_time_log(
    entry_in: schemas.TimeLogCreate,
    repo: RepositoryDep,
    current_user: CurrentUserDep
):
    """
    Log a new interval for the given day.
    Rejected with 400 when start is not before end and 409 when it overlaps an existing log.
    """
    candidate = Interval(
        start=entry_in.start_minute,
        end=entry_in.end_minute,
        category=entry_in.utilization,
        description=entry_in.description,
    )
    db_log = await repo.create(current_user.id, entry_in.date, candidate)
    return schemas.TimeLog.model_validate(db_log)

@router.get("", response_model=List[schemas.TimeLog])
async def list_time_logs(
    repo: RepositoryDep,
    current_user: CurrentUserDep,
    date_string: str = Query(..., alias="date", pattern=DATE_PATTERN, description="Day in YYYY-MM-DD format.")
):
    """All time logs of the current user for one day, earliest first."""
    target_date = parse_date_string(date_string)
    rows = await repo.list_for_day(current_user.id, target_date)
    return [schemas.TimeLog.model_validate(row) for row in rows]

@router.get("/slots", response_model=List[schemas.TimeSlot])
async def list_time_slots(
    repo: RepositoryDep,
    current_user: CurrentUserDep,
    date_string: str = Query(..., alias="date", pattern=DATE_PATTERN, description="Day in YYYY-MM-DD format.")
):
    """Occupied ranges of a day as HH:MM pairs, for the range picker."""
    target_date = parse_date_string(date_string)
    intervals = await repo.load_interval_set(current_user.id, target_date)
    return [
        schemas.TimeSlot(
            start_time=format_clock(interval.start),
            end_time=format_clock(interval.end),
            utilization=interval.category,
        )
        for interval in intervals
    ]

@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_time_log(
    log_id: uuid.UUID,
    repo: RepositoryDep,
    current_user: CurrentUserDep
):
    removed = await repo.delete(current_user.id, log_id)
    if not removed:
        logger.warning(f"Time log {log_id} not found for user {current_user.id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Time log not found"
        )
