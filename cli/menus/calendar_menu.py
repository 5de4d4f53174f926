# cli/menus/calendar_menu.py

"""
Student Calendar menu for the attendance CLI.

Loads one student's monthly attendance rows and the branch holiday rows from JSON, reconciles
them with `AttendanceCalendarReconciler`, and renders the month grid with its legend. The
reconciled marked-dates map can also be exported for the calendar widget.
"""

import datetime

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.path_utils import resolve_input_path, unwrap_rows, write_json
from core.calendar_reconciler import AttendanceCalendarReconciler
from core.importers import import_day_records, import_holidays
from models.calendar_overlay import CalendarOverlay


def run() -> None:
    """
    Top-level entry for the Student Calendar menu.

    Notes:
        - Both files must load before reconciling; cancelling either returns to the Start Menu.
        - Rows the importers could not parse are skipped and reported.
    """
    holiday_file = helpers.prompt_json_file_or_cancel("holiday calendar")
    if holiday_file is MenuSignal.CANCEL:
        helpers.returning_to("Start Menu")
        return

    holiday_response = import_holidays(unwrap_rows(holiday_file[1], "holidays"))
    if not holiday_response:
        helpers.display_response_failure(holiday_response)
        helpers.returning_to("Start Menu")
        return

    report_skipped(holiday_response["skipped"], "holiday")
    reconciler = AttendanceCalendarReconciler(holiday_response["records"])

    while True:
        attendance_file = helpers.prompt_json_file_or_cancel("student attendance")
        if attendance_file is MenuSignal.CANCEL:
            break

        attendance_response = import_day_records(unwrap_rows(attendance_file[1], "rows"))
        if not attendance_response:
            helpers.display_response_failure(attendance_response)
            continue

        report_skipped(attendance_response["skipped"], "attendance record")

        class_id = helpers.prompt_user_input_or_none(
            "Enter the student's class ID (leave blank if unknown):"
        )

        overlay = reconciler.reconcile(attendance_response["records"], class_id)

        display_overlay(overlay)

        if helpers.confirm_action("Export the marked dates for the calendar widget?"):
            export_marked_dates(overlay)

        if not helpers.confirm_action("View another student?"):
            break

    helpers.returning_to("Start Menu")


def report_skipped(skipped: int, record_name: str) -> None:
    if skipped:
        print(f"\nSkipped {formatters.format_count(skipped, f'unreadable {record_name}')}.")


def display_overlay(overlay: CalendarOverlay) -> None:
    helpers.print_banner("Attendance Calendar")

    if overlay.is_empty():
        print("\nNo attendance or holidays recorded.")
    else:
        for month in months_covered(overlay):
            print(f"\n{model_formatters.format_overlay_month(overlay, month)}")

    print(f"\n{model_formatters.format_overlay_legend(overlay)}")


def months_covered(overlay: CalendarOverlay) -> list[datetime.date]:
    return sorted({date.replace(day=1) for date in overlay.days})


def export_marked_dates(overlay: CalendarOverlay) -> None:
    path_input = helpers.prompt_user_input_or_cancel(
        "Enter the file to write the marked dates to (leave blank to cancel):"
    )

    if path_input is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    file_path = resolve_input_path(str(path_input))

    try:
        write_json(file_path, model_formatters.overlay_to_marked_dates(overlay))
    except OSError as e:
        print(f"\nCould not write {file_path}: {e}.")
        return

    print(f"\nMarked dates written to {file_path}.")
