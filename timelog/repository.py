# timelog/repository.py
"""
Persistence for time logs.

The scheduling core only ever sees an IntervalSet snapshot. Inserts re-check
the overlap invariant inside the writing transaction, with the owning user
row locked, so two sessions cannot both insert into the same free range.
"""

import logging
import uuid
from datetime import date
from typing import Iterable, List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from timelog.core.models import TimeLog as TimeLogModel, User as UserModel
from timelog.scheduling.aggregation import log_violations
from timelog.scheduling.clock import at_minute
from timelog.scheduling.errors import DataIntegrityError
from timelog.scheduling.intervals import DAY_FRAME, Interval, IntervalSet
from timelog.scheduling.validator import validate

log = logging.getLogger(__name__)


def build_interval_set(user_id, day: date, rows: Iterable[TimeLogModel]) -> IntervalSet:
    """
    Convert stored rows into an IntervalSet for the scheduling core.

    Raises:
        DataIntegrityError: If a row starts or ends outside its local day.
    """
    intervals: List[Interval] = []
    violations: List[str] = []
    for row in rows:
        start, end = row.minute_span()
        if not (DAY_FRAME.contains(start) and DAY_FRAME.contains(end)):
            violations.append(
                f"time log {row.id} [{row.start_time}, {row.end_time}] lies outside local day {day}"
            )
            continue
        intervals.append(row.to_interval())

    if violations:
        log_violations(f"user={user_id} day={day}", violations)
        raise DataIntegrityError(violations)
    return IntervalSet(user_id=str(user_id), day=day, intervals=intervals)


class TimeLogRepository:
    """Loads and stores the time logs of one user for one calendar day at a time."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_day(self, user_id: uuid.UUID, day: date) -> List[TimeLogModel]:
        result = await self.db.execute(
            select(TimeLogModel)
            .where(TimeLogModel.user_id == user_id, TimeLogModel.local_day == day)
            .order_by(TimeLogModel.start_time)
        )
        return list(result.scalars().all())

    async def load_interval_set(self, user_id: uuid.UUID, day: date) -> IntervalSet:
        rows = await self.list_for_day(user_id, day)
        return build_interval_set(user_id, day, rows)

    async def create(
        self,
        user_id: uuid.UUID,
        day: date,
        candidate: Interval,
    ) -> TimeLogModel:
        """
        Insert a candidate interval after validating it against the stored day.

        Raises:
            InvalidRange: If the candidate does not start before it ends.
            Overlap: If the candidate intersects a stored time log.
        """
        # Serialise writers for this user until commit/rollback.
        await self.db.execute(
            select(UserModel.id).where(UserModel.id == user_id).with_for_update()
        )
        existing = await self.load_interval_set(user_id, day)

        verdict = validate(candidate, existing)
        if not verdict.accepted:
            log.warning(f"Rejected time log for user {user_id} on {day}: {verdict.reason}")
            verdict.raise_for_rejection()

        db_log = TimeLogModel(
            user_id=user_id,
            local_day=day,
            start_time=at_minute(day, candidate.start),
            end_time=at_minute(day, candidate.end),
            description=candidate.description,
            utilization=candidate.category,
        )
        self.db.add(db_log)
        await self.db.commit()
        await self.db.refresh(db_log)
        log.info(f"Created time log {db_log.id} for user {user_id} on {day} [{candidate.start}, {candidate.end})")
        return db_log

    async def delete(self, user_id: uuid.UUID, log_id: uuid.UUID) -> bool:
        result = await self.db.execute(
            delete(TimeLogModel).where(TimeLogModel.id == log_id, TimeLogModel.user_id == user_id)
        )
        await self.db.commit()
        removed = (result.rowcount or 0) > 0
        if removed:
            log.info(f"Deleted time log {log_id} for user {user_id}")
        return removed
