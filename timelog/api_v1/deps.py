from typing import Annotated
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from timelog.core.database import get_db
from timelog.repository import TimeLogRepository

def get_time_log_repository(db: AsyncSession = Depends(get_db)) -> TimeLogRepository:
    """
    Dependency to get the time log repository bound to the request's session.
    The session is committed or rolled back by get_db after the request.
    """
    return TimeLogRepository(db)

RepositoryDep = Annotated[TimeLogRepository, Depends(get_time_log_repository)]
