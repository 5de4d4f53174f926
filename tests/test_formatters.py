# tests/test_formatters.py

import datetime

import core.formatters as formatters
from cli.model_formatters import format_roster_entry_oneline, format_session_summary
from core.roster_session import RosterSelectionSession


def test_format_banner_text():
    banner = formatters.format_banner_text("Roster", width=10)

    assert banner == "==========\n  Roster  \n=========="


def test_format_count():
    assert formatters.format_count(1, "student") == "1 student"
    assert formatters.format_count(3, "student") == "3 students"
    assert formatters.format_count(0, "class", "classes") == "0 classes"


def test_month_weeks_pads_outside_days():
    weeks = formatters.month_weeks(2024, 1)

    # January 2024 starts on a Monday
    assert weeks[0][0] is None
    assert weeks[0][1] == datetime.date(2024, 1, 1)
    assert all(day is None or day.month == 1 for week in weeks for day in week)
    assert sum(1 for week in weeks for day in week if day is not None) == 31


def test_format_session_summary(unmarked_session, locked_session):
    unmarked_session.toggle_absence("id1", True)

    editing = format_session_summary(unmarked_session)
    locked = format_session_summary(locked_session)

    assert editing.startswith("Present Student Count : 2 / 3")
    assert "Status: Editing" in editing
    assert "Already marked" in locked


def test_format_roster_entry_oneline(unmarked_session):
    entry = unmarked_session.entries[1]
    unmarked_session.toggle_absence(entry.enrollment_id, True)

    line = format_roster_entry_oneline(entry, unmarked_session)

    assert line.startswith("[A]")
    assert "Ben Ortiz" in line
    assert line.endswith("id2")


def test_format_roster_entry_oneline_on_partially_marked_roster(
    partially_marked_entries,
):
    session = RosterSelectionSession.create(partially_marked_entries)

    unmarked = format_roster_entry_oneline(session.entries[0], session)
    absent = format_roster_entry_oneline(session.entries[1], session)

    assert unmarked.startswith("[ ]")
    assert absent.startswith("[A]")
