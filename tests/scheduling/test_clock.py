from datetime import date, datetime

import pytest

from timelog.scheduling.clock import at_minute, format_clock, minute_of_day, parse_clock


@pytest.mark.parametrize(
    "value,minutes",
    [("00:00", 0), ("09:30", 570), ("23:59", 1439), ("24:00", 1440), (" 06:00 ", 360)],
)
def test_parse_clock(value, minutes):
    assert parse_clock(value) == minutes


@pytest.mark.parametrize("value", ["9:30", "24:01", "25:00", "12:60", "noon", ""])
def test_parse_clock_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_clock(value)


def test_format_clock():
    assert format_clock(0) == "00:00"
    assert format_clock(570) == "09:30"
    assert format_clock(1440) == "24:00"


def test_format_clock_rejects_out_of_day():
    with pytest.raises(ValueError):
        format_clock(1441)


def test_minute_of_day_truncates_seconds():
    assert minute_of_day(datetime(2025, 1, 1, 9, 30, 59), date(2025, 1, 1)) == 570


def test_at_minute_end_of_day_is_next_midnight():
    day = date(2025, 1, 1)
    assert at_minute(day, 1440) == datetime(2025, 1, 2, 0, 0)
    assert minute_of_day(at_minute(day, 1440), day) == 1440
