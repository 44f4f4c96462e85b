import uuid
from datetime import date, datetime
from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from timelog import schemas
from timelog.api_v1.deps import get_time_log_repository
from timelog.auth import require_auth
from timelog.core.models import TimeLog as TimeLogModel
from timelog.main import app
from timelog.repository import build_interval_set
from timelog.scheduling.clock import at_minute
from timelog.scheduling.intervals import Category, Interval, IntervalSet
from timelog.scheduling.validator import validate

TEST_USER = schemas.User(id=uuid.UUID("00000000-0000-0000-0000-000000000001"), email="user@example.com", name="Test")


class InMemoryTimeLogRepository:
    """Keeps time log rows in a dict and applies the same validation as TimeLogRepository."""

    def __init__(self):
        self.rows: Dict[uuid.UUID, TimeLogModel] = {}

    def seed(self, day: date, start: int, end: int, category=Category.GOOD, description="seeded", user_id=None):
        row = TimeLogModel(
            id=uuid.uuid4(),
            user_id=user_id or TEST_USER.id,
            local_day=day,
            start_time=at_minute(day, start),
            end_time=at_minute(day, end),
            description=description,
            utilization=category,
            created_at=datetime(2025, 1, 1, 0, 0),
        )
        self.rows[row.id] = row
        return row

    async def list_for_day(self, user_id, day) -> List[TimeLogModel]:
        rows = [r for r in self.rows.values() if r.user_id == user_id and r.local_day == day]
        return sorted(rows, key=lambda r: r.start_time)

    async def load_interval_set(self, user_id, day) -> IntervalSet:
        return build_interval_set(user_id, day, await self.list_for_day(user_id, day))

    async def create(self, user_id, day, candidate: Interval) -> TimeLogModel:
        existing = await self.load_interval_set(user_id, day)
        validate(candidate, existing).raise_for_rejection()
        return self.seed(day, candidate.start, candidate.end, candidate.category, candidate.description, user_id)

    async def delete(self, user_id, log_id) -> bool:
        row = self.rows.get(log_id)
        if row is None or row.user_id != user_id:
            return False
        del self.rows[log_id]
        return True


@pytest.fixture
def repo():
    return InMemoryTimeLogRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[require_auth] = lambda: TEST_USER
    app.dependency_overrides[get_time_log_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_user():
    return TEST_USER
