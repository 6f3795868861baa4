"""Tests for snapshot validation and slot key helpers."""

import pytest

from logic.logic_planner.planner_errors import InvalidSnapshotError
from logic.logic_planner.planner_utils import PlannerUtils
from logic.logic_planner.planner_validation import PlannerValidation


def validate(snapshot):
    return PlannerValidation.validate_snapshot(snapshot, 7, 35)


def test_make_key_format():
    assert PlannerUtils.make_key(3, 12) == "day-3-slot-12"


def test_parse_key():
    assert PlannerUtils.parse_key("day-6-slot-34") == (6, 34)


@pytest.mark.parametrize("key", ["day-1", "slot-1-day-2", "day-a-slot-1", "day--1-slot-2", "day-1-slot-",
                                 "day-01-slot-002", "day-١-slot-0", "day-¹-slot-0"])
def test_parse_key_rejects_malformed(key):
    with pytest.raises(ValueError):
        PlannerUtils.parse_key(key)


def test_percentage():
    assert PlannerUtils.percentage(7, 35) == 20.0
    assert PlannerUtils.percentage(0, 0) == 0.0


def test_valid_snapshot_is_normalized():
    tasks, completions, active_day = validate({
        "tasks": {"day-0-slot-0": "Workout", "day-2-slot-3": ""},
        "completions": {"day-0-slot-0": True},
        "activeDay": 2,
    })
    assert tasks == {(0, 0): "Workout", (2, 3): ""}
    assert completions == {(0, 0): True}
    assert active_day == 2


def test_missing_mappings_mean_empty():
    assert validate({"activeDay": 4}) == ({}, {}, 4)


def test_legacy_current_day_field():
    _, _, active_day = validate({"tasks": {}, "completions": {}, "currentDay": 3})
    assert active_day == 3


@pytest.mark.parametrize("snapshot", [
    [],
    "tasks",
    {"tasks": ["Workout"]},
    {"completions": "yes"},
    {"tasks": {"day-7-slot-0": "x"}},
    {"tasks": {"day-0-slot-35": "x"}},
    {"tasks": {"monday-0": "x"}},
    {"tasks": {"day-01-slot-002": "x"}},
    {"tasks": {"day-١-slot-0": "x"}},
    {"completions": {"day-0-slot-00": True}},
    {"tasks": {"day-0-slot-0": 5}},
    {"completions": {"day-0-slot-0": "true"}},
    {"completions": {"day-0-slot-0": 1}},
    {"activeDay": 7},
    {"activeDay": -1},
    {"activeDay": "0"},
    {"activeDay": True},
])
def test_invalid_snapshots_rejected(snapshot):
    with pytest.raises(InvalidSnapshotError):
        validate(snapshot)
