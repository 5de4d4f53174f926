# tests/test_marking_target.py

import datetime

import pytest

from models.marking_target import MarkingKind, MarkingTarget


def test_class_target():
    target = MarkingTarget.for_class()

    assert target.kind is MarkingKind.CLASS
    assert target.endpoint == "/mark-student-attendance"
    assert target.request_params() == {}


def test_event_target():
    target = MarkingTarget.for_event(" 42 ")

    assert target.kind is MarkingKind.EVENT
    assert target.event_id == "42"
    assert target.endpoint == "/mark-student-event-attendance"
    assert target.request_params() == {"eventid": "42"}


def test_event_target_requires_id():
    with pytest.raises(ValueError):
        MarkingTarget.for_event("  ")


def test_back_dated_target():
    target = MarkingTarget.for_date(datetime.date(2024, 1, 5))

    assert target.kind is MarkingKind.BACK_DATED
    assert target.endpoint == "/mark-student-attendance-back"
    assert target.request_params() == {"attendancedate": "2024-01-05"}
    assert str(target) == "Class on 2024-01-05"


def test_back_dated_target_rejects_future_dates():
    tomorrow = datetime.date.today() + datetime.timedelta(days=1)

    with pytest.raises(ValueError):
        MarkingTarget.for_date(tomorrow)


def test_targets_compare_by_value():
    assert MarkingTarget.for_event("7") == MarkingTarget.for_event("7")
    assert MarkingTarget.for_event("7") != MarkingTarget.for_class()
