# cli/model_formatters.py

# anything that renders domain objects for the terminal or the calendar widget
import datetime
from textwrap import dedent

import core.formatters as formatters
from core.roster_session import RosterSelectionSession
from models.calendar_overlay import CalendarOverlay, DayTag
from models.student import AttendanceStatus, RosterEntry

DAY_TAG_COLORS: dict[DayTag, str] = {
    DayTag.HOLIDAY_ALL: "#9B63F8",
    DayTag.HOLIDAY_CELEBRATION: "#D33A2C",
    DayTag.HOLIDAY_CLASS: "#808000",
    DayTag.PRESENT: "green",
    DayTag.ABSENT: "red",
}

DAY_TAG_LABELS: dict[DayTag, str] = {
    DayTag.HOLIDAY_ALL: "Holiday (All)",
    DayTag.HOLIDAY_CELEBRATION: "Celebration",
    DayTag.HOLIDAY_CLASS: "Student Holiday",
    DayTag.PRESENT: "Present",
    DayTag.ABSENT: "Absent",
}

DAY_TAG_SYMBOLS: dict[DayTag, str] = {
    DayTag.HOLIDAY_ALL: "H",
    DayTag.HOLIDAY_CELEBRATION: "C",
    DayTag.HOLIDAY_CLASS: "S",
    DayTag.PRESENT: "P",
    DayTag.ABSENT: "A",
}

STATUS_MARKS: dict[AttendanceStatus, str] = {
    AttendanceStatus.PRESENT: "[P]",
    AttendanceStatus.ABSENT: "[A]",
    AttendanceStatus.UNMARKED: "[ ]",
}

# === roster formatters ===


def format_roster_entry_oneline(
    entry: RosterEntry, session: RosterSelectionSession
) -> str:
    student = entry.student
    mark = STATUS_MARKS[session.status_of(entry.enrollment_id)]
    roll = student.roll_number or "-"

    return f"{mark} {roll:>4} | {student.display_name:<20} | {student.enrollment_id}"


def format_session_summary(session: RosterSelectionSession) -> str:
    if session.is_locked:
        state = "Already marked (review only)"
    elif session.is_confirming:
        state = "Review before submitting"
    else:
        state = "Editing"

    return dedent(
        f"""\
        Present Student Count : {session.present_count()} / {session.total_count()}
        ... Absent: {session.absent_count()}
        ... Status: {state}"""
    )


# === calendar formatters ===


def overlay_to_marked_dates(overlay: CalendarOverlay) -> dict[str, dict]:
    """
    Converts an overlay into the marked-dates map consumed by the calendar widget.

    Returns:
        dict[str, dict]: ISO date strings mapped to {"selected": True, "selectedColor": <color>}.
    """
    return {
        date.isoformat(): {
            "selected": True,
            "selectedColor": DAY_TAG_COLORS[tag],
        }
        for date, tag in sorted(overlay.days.items())
    }


def format_overlay_legend(overlay: CalendarOverlay) -> str:
    legend = "  ".join(
        f"{DAY_TAG_SYMBOLS[tag]}={DAY_TAG_LABELS[tag]}" for tag in DayTag
    )

    return f"Present: {overlay.present_count}   Absent: {overlay.absent_count}\n{legend}"


def format_overlay_month(overlay: CalendarOverlay, month: datetime.date) -> str:
    """
    Renders one month of an overlay as a Sunday-first text grid.

    Each day cell shows the day number followed by its tag symbol, or a dot if untagged.
    """
    lines = [formatters.format_month_and_year(month), " Sun  Mon  Tue  Wed  Thu  Fri  Sat"]

    for week in formatters.month_weeks(month.year, month.month):
        cells = []

        for day in week:
            if day is None:
                cells.append("    ")
                continue

            tag = overlay.tag_on(day)
            symbol = DAY_TAG_SYMBOLS[tag] if tag is not None else "."
            cells.append(f"{day.day:>3}{symbol}")

        lines.append(" ".join(cells))

    return "\n".join(lines)
