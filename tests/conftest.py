# tests/conftest.py

import datetime

import pytest

from core.roster_session import RosterSelectionSession
from models.day_record import DayRecord
from models.holiday import HolidayCategory, HolidayRecord
from models.student import AttendanceStatus, RosterEntry, StudentRef


def _make_entry(
    enrollment_id: str,
    status: AttendanceStatus = AttendanceStatus.UNMARKED,
    roll: str = "",
    name: str = "",
) -> RosterEntry:
    return RosterEntry(StudentRef(enrollment_id, roll, name or enrollment_id), status)


@pytest.fixture
def make_entry():
    return _make_entry


@pytest.fixture
def sample_student():
    return StudentRef("s001", "1", "Sean Cameron")


@pytest.fixture
def unmarked_entries():
    return [
        _make_entry("id1", roll="1", name="Asha Rao"),
        _make_entry("id2", roll="2", name="Ben Ortiz"),
        _make_entry("id3", roll="3", name="Chen Li"),
    ]


@pytest.fixture
def marked_entries():
    return [
        _make_entry("id1", AttendanceStatus.PRESENT),
        _make_entry("id2", AttendanceStatus.ABSENT),
        _make_entry("id3", AttendanceStatus.PRESENT),
    ]


@pytest.fixture
def partially_marked_entries():
    # first entry is unmarked; the lock must still be detected
    return [
        _make_entry("id1"),
        _make_entry("id2", AttendanceStatus.ABSENT),
        _make_entry("id3"),
    ]


@pytest.fixture
def unmarked_session(unmarked_entries):
    return RosterSelectionSession.create(unmarked_entries)


@pytest.fixture
def locked_session(marked_entries):
    return RosterSelectionSession.create(marked_entries)


@pytest.fixture
def new_year():
    return datetime.date(2024, 1, 1)


@pytest.fixture
def sample_holidays():
    return [
        HolidayRecord(datetime.date(2024, 1, 1), HolidayCategory.FOR_ALL),
        HolidayRecord(datetime.date(2024, 1, 15), HolidayCategory.CELEBRATION),
        HolidayRecord(
            datetime.date(2024, 1, 20),
            HolidayCategory.FOR_STUDENTS,
            frozenset({"7", "8"}),
        ),
        HolidayRecord(datetime.date(2024, 1, 22), HolidayCategory.FOR_STAFF),
    ]


@pytest.fixture
def sample_day_records():
    return [
        DayRecord(datetime.date(2024, 1, 2), AttendanceStatus.PRESENT),
        DayRecord(datetime.date(2024, 1, 3), AttendanceStatus.ABSENT),
        DayRecord(datetime.date(2024, 1, 4), AttendanceStatus.PRESENT),
    ]
