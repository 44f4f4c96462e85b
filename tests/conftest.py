import uuid
from datetime import date

import pytest

from timelog.scheduling.intervals import Category, Interval, IntervalSet


def make_interval(start, end, category=Category.GOOD, description="", interval_id=None):
    return Interval(
        id=interval_id or str(uuid.uuid4()),
        start=start,
        end=end,
        category=category,
        description=description,
    )


@pytest.fixture
def day():
    return date(2025, 1, 1)


@pytest.fixture
def empty_set(day):
    return IntervalSet(user_id="user-1", day=day)


@pytest.fixture
def morning_set(day):
    """09:00-10:00 and 11:00-12:00."""
    return IntervalSet(
        user_id="user-1",
        day=day,
        intervals=[
            make_interval(540, 600, interval_id="a"),
            make_interval(660, 720, interval_id="b"),
        ],
    )


@pytest.fixture
def interval():
    return make_interval
