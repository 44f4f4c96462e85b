import pytest

from timelog.scheduling.errors import InvalidRange
from timelog.scheduling.gaps import Gap, find_containing_gap
from timelog.scheduling.intervals import DayFrame, IntervalSet


def test_gap_between_two_intervals(morning_set):
    assert find_containing_gap(630, morning_set) == Gap(600, 660)


def test_empty_day_returns_whole_frame(empty_set):
    gap = find_containing_gap(720, empty_set)
    assert gap == Gap(0, 1440)
    assert gap.width == 1440


def test_gap_before_first_interval(morning_set):
    assert find_containing_gap(100, morning_set) == Gap(0, 540)


def test_gap_after_last_interval(morning_set):
    assert find_containing_gap(1000, morning_set) == Gap(720, 1440)


def test_point_on_frame_edges(morning_set):
    assert find_containing_gap(0, morning_set) == Gap(0, 540)
    assert find_containing_gap(1440, morning_set) == Gap(720, 1440)


def test_point_on_shared_boundary_prefers_widest(day, interval):
    existing = IntervalSet(day=day, intervals=[interval(600, 660, interval_id="x")])
    # 600 sits between [0, 600] and [600, 660]; the first is wider
    assert find_containing_gap(600, existing) == Gap(0, 600)


def test_tie_keeps_earliest_gap(day, interval):
    existing = IntervalSet(day=day, intervals=[interval(720, 720, interval_id="pt")])
    assert find_containing_gap(720, existing) == Gap(0, 720)


def test_shared_edge_of_adjacent_intervals_picks_widest_pair(day, interval):
    existing = IntervalSet(
        day=day,
        intervals=[interval(0, 600, interval_id="a"), interval(600, 1440, interval_id="b")],
    )
    gap = find_containing_gap(600, existing)
    assert gap.width == 840
    assert not gap.is_empty


def test_degenerate_frame_yields_empty_gap(empty_set):
    gap = find_containing_gap(0, empty_set, DayFrame(start=0, end=0))
    assert gap == Gap(0, 0)
    assert gap.is_empty


@pytest.mark.parametrize("point", [-1, 1441])
def test_point_outside_frame_raises(empty_set, point):
    with pytest.raises(InvalidRange):
        find_containing_gap(point, empty_set)


def test_custom_frame(empty_set):
    frame = DayFrame(start=480, end=1080)
    assert find_containing_gap(600, empty_set, frame) == Gap(480, 1080)
    with pytest.raises(InvalidRange):
        find_containing_gap(100, empty_set, frame)
