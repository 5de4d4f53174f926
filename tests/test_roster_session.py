# tests/test_roster_session.py

import pytest

from core.errors import InvalidStateError
from core.roster_session import (
    RosterSelectionSession,
    SessionPhase,
    sort_roster_entries,
)
from models.settings import RosterSortKey
from models.student import AttendanceStatus

# === construction and lock ===


def test_unmarked_roster_is_not_locked(unmarked_session):
    assert not unmarked_session.is_locked
    assert unmarked_session.absent_ids == frozenset()
    assert unmarked_session.phase is SessionPhase.EDITING


def test_marked_roster_is_locked_and_mirrors_server(locked_session):
    assert locked_session.is_locked
    assert locked_session.absent_ids == frozenset({"id2"})
    assert locked_session.present_count() == 2


def test_partially_marked_roster_is_locked(partially_marked_entries):
    session = RosterSelectionSession.create(partially_marked_entries)

    assert session.is_locked
    assert session.absent_ids == frozenset({"id2"})


def test_status_of_on_locked_roster_reports_server_status(partially_marked_entries):
    session = RosterSelectionSession.create(partially_marked_entries)

    assert session.status_of("id1") is AttendanceStatus.UNMARKED
    assert session.status_of("id2") is AttendanceStatus.ABSENT


def test_duplicate_enrollment_ids_are_rejected(make_entry):
    with pytest.raises(ValueError):
        RosterSelectionSession.create([make_entry("id1"), make_entry("id1")])


def test_entries_keep_fetch_order(unmarked_entries, unmarked_session):
    assert list(unmarked_session.entries) == unmarked_entries


# === toggling ===


def test_toggle_absence_assertions_are_idempotent(unmarked_session):
    unmarked_session.toggle_absence("id1", True)
    unmarked_session.toggle_absence("id1", True)
    assert unmarked_session.absent_ids == frozenset({"id1"})

    unmarked_session.toggle_absence("id1", False)
    unmarked_session.toggle_absence("id1", False)
    assert unmarked_session.absent_ids == frozenset()


def test_toggle_absence_without_force_flips(unmarked_session):
    unmarked_session.toggle_absence("id2")
    assert unmarked_session.is_absent("id2")

    unmarked_session.toggle_absence("id2")
    assert not unmarked_session.is_absent("id2")


def test_toggle_absence_round_trip_restores_absent_set(unmarked_session):
    unmarked_session.toggle_absence("id3", True)
    before = unmarked_session.absent_ids

    unmarked_session.toggle_absence("id1", True)
    unmarked_session.toggle_absence("id1", False)

    assert unmarked_session.absent_ids == before


def test_toggle_absence_rejects_unknown_student(unmarked_session):
    with pytest.raises(ValueError):
        unmarked_session.toggle_absence("id99", True)


def test_bulk_mark_all_absent_and_present(unmarked_session):
    unmarked_session.bulk_mark_all_absent()
    assert unmarked_session.present_count() == 0
    assert unmarked_session.absent_ids == frozenset({"id1", "id2", "id3"})

    unmarked_session.bulk_mark_all_present()
    assert unmarked_session.present_count() == unmarked_session.total_count()


def test_toggle_all_alternates(unmarked_session):
    unmarked_session.toggle_all()
    assert unmarked_session.absent_count() == 3

    unmarked_session.toggle_all()
    assert unmarked_session.absent_count() == 0

    unmarked_session.toggle_absence("id1", True)
    unmarked_session.toggle_all()
    assert unmarked_session.absent_count() == 0


def test_status_of_reflects_selection(unmarked_session):
    unmarked_session.toggle_absence("id2", True)

    assert unmarked_session.status_of("id1") is AttendanceStatus.PRESENT
    assert unmarked_session.status_of("id2") is AttendanceStatus.ABSENT


# === locked sessions ===


def test_mutators_are_no_ops_when_locked(locked_session):
    before = locked_session.absent_ids

    locked_session.toggle_absence("id1", True)
    locked_session.toggle_absence("id2", False)
    locked_session.toggle_absence("id3")
    locked_session.toggle_absence("id99")
    locked_session.bulk_mark_all_absent()
    locked_session.bulk_mark_all_present()
    locked_session.toggle_all()

    assert locked_session.absent_ids == before


def test_begin_confirmation_fails_when_locked(locked_session):
    with pytest.raises(InvalidStateError):
        locked_session.begin_confirmation()

    assert locked_session.phase is SessionPhase.EDITING


def test_begin_confirmation_fails_for_empty_roster():
    session = RosterSelectionSession.create([])

    assert not session.is_locked
    with pytest.raises(InvalidStateError):
        session.begin_confirmation()


# === confirmation phase ===


def test_payload_requires_confirming(unmarked_session):
    with pytest.raises(InvalidStateError):
        unmarked_session.build_submission_payload()


def test_mutations_fail_while_confirming(unmarked_session):
    unmarked_session.begin_confirmation()

    with pytest.raises(InvalidStateError):
        unmarked_session.toggle_absence("id1", True)

    with pytest.raises(InvalidStateError):
        unmarked_session.bulk_mark_all_absent()

    with pytest.raises(InvalidStateError):
        unmarked_session.bulk_mark_all_present()

    with pytest.raises(InvalidStateError):
        unmarked_session.toggle_all()

    assert unmarked_session.absent_ids == frozenset()


def test_cancel_confirmation_returns_to_editing(unmarked_session):
    unmarked_session.cancel_confirmation()
    assert unmarked_session.phase is SessionPhase.EDITING

    unmarked_session.begin_confirmation()
    assert unmarked_session.is_confirming

    unmarked_session.cancel_confirmation()
    assert unmarked_session.phase is SessionPhase.EDITING

    unmarked_session.toggle_absence("id1", True)
    assert unmarked_session.is_absent("id1")


def test_payload_invariants(unmarked_session):
    unmarked_session.toggle_absence("id3", True)
    unmarked_session.toggle_absence("id1", True)
    unmarked_session.begin_confirmation()

    payload = unmarked_session.build_submission_payload()

    assert set(payload.absent_student_ids) <= set(payload.all_student_ids)
    assert len(set(payload.all_student_ids)) == len(payload.all_student_ids)
    assert len(payload.all_student_ids) == unmarked_session.total_count()
    assert payload.absent_student_ids == ("id1", "id3")


def test_mark_all_absent_except_one_end_to_end(unmarked_session):
    unmarked_session.bulk_mark_all_absent()
    unmarked_session.toggle_absence("id2", False)
    unmarked_session.begin_confirmation()

    payload = unmarked_session.build_submission_payload()

    assert list(payload.all_student_ids) == ["id1", "id2", "id3"]
    assert list(payload.absent_student_ids) == ["id1", "id3"]


# === sorting ===


def test_sort_roster_entries(make_entry):
    entries = [
        make_entry("e3", roll="10", name="charlie"),
        make_entry("e1", roll="2", name="Bravo"),
        make_entry("e2", roll="A1", name="alpha"),
    ]

    by_name = sort_roster_entries(entries, RosterSortKey.NAME)
    by_roll = sort_roster_entries(entries, RosterSortKey.ROLL)
    by_enrollment = sort_roster_entries(entries, RosterSortKey.ENROLLMENT)

    assert [x.enrollment_id for x in by_name] == ["e2", "e1", "e3"]
    assert [x.enrollment_id for x in by_roll] == ["e1", "e3", "e2"]
    assert [x.enrollment_id for x in by_enrollment] == ["e1", "e2", "e3"]
