# tests/test_importers.py

from core.importers import (
    import_day_records,
    import_holidays,
    import_roster,
    import_settings,
)
from core.response import ErrorCode
from models.settings import RosterSortKey


def test_import_roster():
    response = import_roster(
        [
            {"enrollment": "e1", "roll": "1", "name": "Asha Rao"},
            {"enrollment": "e2", "roll": "2", "name": "Ben Ortiz", "status": ""},
        ]
    )

    assert response.success
    session = response["session"]
    assert session.total_count() == 2
    assert not session.is_locked


def test_import_roster_detects_marked_roster():
    response = import_roster(
        [
            {"enrollment": "e1", "status": "unmarked"},
            {"enrollment": "e2", "status": "absent"},
        ]
    )

    assert response.success
    session = response["session"]
    assert session.is_locked
    assert session.absent_ids == frozenset({"e2"})


def test_import_roster_sorts_when_asked():
    response = import_roster(
        [
            {"enrollment": "e1", "roll": "10"},
            {"enrollment": "e2", "roll": "9"},
        ],
        sort_by=RosterSortKey.ROLL,
    )

    assert response.success
    assert [x.enrollment_id for x in response["session"].entries] == ["e2", "e1"]


def test_import_roster_failures():
    not_a_list = import_roster({"rows": []})
    missing = import_roster([{"name": "No ID"}])
    bad_status = import_roster([{"enrollment": "e1", "status": "late"}])
    duplicate = import_roster([{"enrollment": "e1"}, {"enrollment": "e1"}])

    assert not not_a_list.success
    assert not_a_list.error is ErrorCode.INVALID_INPUT

    assert missing.error is ErrorCode.MISSING_REQUIRED_FIELD
    assert bad_status.error is ErrorCode.INVALID_FIELD_VALUE
    assert duplicate.error is ErrorCode.VALIDATION_FAILED
    assert duplicate.detail.startswith("Roster validation failed")


def test_import_day_records_skips_bad_rows():
    response = import_day_records(
        [
            {"date": "2024-01-02", "status": "present"},
            {"date": "2024-01-03", "status": "late"},
            {"date": "not-a-date", "status": "absent"},
            {"status": "absent"},
            "garbage",
            {"date": "2024-01-04", "status": "absent"},
        ]
    )

    assert response.success
    assert len(response.data["records"]) == 2
    assert response.data["skipped"] == 4


def test_import_holidays_skips_bad_rows():
    response = import_holidays(
        [
            {"dat": "2024-01-01", "category": "forall"},
            {"dat": "2024-01-02", "category": "unknown"},
        ]
    )

    assert response.success
    assert len(response.data["records"]) == 1
    assert response.data["skipped"] == 1


def test_lenient_imports_reject_non_lists():
    assert import_day_records(None).error is ErrorCode.INVALID_INPUT
    assert import_holidays({"holidays": []}).error is ErrorCode.INVALID_INPUT


def test_import_settings():
    defaults = import_settings(None)
    custom = import_settings({"defaultAttendanceStatus": "yes", "sortstudentsby": "roll"})
    bad = import_settings({"sortstudentsby": "height"})

    assert defaults.success
    assert not defaults["settings"].default_all_present
    assert defaults["settings"].sort_by is RosterSortKey.NAME

    assert custom.data["settings"].default_all_present
    assert custom.data["settings"].sort_by is RosterSortKey.ROLL

    assert not bad.success
    assert bad.error is ErrorCode.INVALID_FIELD_VALUE
