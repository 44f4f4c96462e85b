import pytest

from timelog.scheduling.errors import InvalidRange, Overlap
from timelog.scheduling.intervals import Category, Interval, IntervalSet
from timelog.scheduling.validator import ACCEPTED, validate


def candidate(start, end):
    return Interval(start=start, end=end, category=Category.NEUTRAL)


def test_accepts_range_in_free_gap(morning_set):
    assert validate(candidate(600, 660), morning_set) is ACCEPTED


def test_accepts_anything_on_empty_day(empty_set):
    verdict = validate(candidate(0, 1440), empty_set)
    assert verdict.accepted


def test_touching_endpoints_do_not_overlap(morning_set):
    assert validate(candidate(480, 540), morning_set).accepted
    assert validate(candidate(720, 780), morning_set).accepted


@pytest.mark.parametrize("start,end", [(600, 600), (700, 650)])
def test_rejects_non_positive_range(empty_set, start, end):
    verdict = validate(candidate(start, end), empty_set)
    assert not verdict.accepted
    assert isinstance(verdict.reason, InvalidRange)
    with pytest.raises(InvalidRange):
        verdict.raise_for_rejection()


def test_rejects_overlap_and_lists_every_conflict(morning_set):
    verdict = validate(candidate(570, 690), morning_set)
    assert not verdict.accepted
    assert isinstance(verdict.reason, Overlap)
    assert [c.id for c in verdict.conflicts] == ["a", "b"]
    with pytest.raises(Overlap) as exc_info:
        verdict.raise_for_rejection()
    assert [c.id for c in exc_info.value.conflicts] == ["a", "b"]


def test_rejects_candidate_containing_existing(morning_set):
    verdict = validate(candidate(500, 610), morning_set)
    assert [c.id for c in verdict.conflicts] == ["a"]


def test_rejects_candidate_inside_existing(morning_set):
    verdict = validate(candidate(550, 560), morning_set)
    assert not verdict.accepted


def test_validate_does_not_mutate_set(morning_set):
    validate(candidate(600, 660), morning_set)
    assert len(morning_set) == 2


@pytest.mark.parametrize(
    "first,second",
    [
        ((540, 600), (570, 630)),  # partial
        ((540, 720), (600, 660)),  # containment
        ((540, 600), (540, 600)),  # identical
        ((0, 1440), (1439, 1440)),
    ],
)
def test_overlap_is_detected_in_both_directions(day, interval, first, second):
    a = interval(*first, interval_id="a")
    b = interval(*second, interval_id="b")

    against_a = validate(candidate(*second), IntervalSet(day=day, intervals=[a]))
    against_b = validate(candidate(*first), IntervalSet(day=day, intervals=[b]))

    assert isinstance(against_a.reason, Overlap)
    assert isinstance(against_b.reason, Overlap)
    assert [c.id for c in against_a.conflicts] == ["a"]
    assert [c.id for c in against_b.conflicts] == ["b"]
