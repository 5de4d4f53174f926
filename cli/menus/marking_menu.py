# cli/menus/marking_menu.py

"""
Mark Attendance menu for the attendance CLI.

Asks what is being marked (today's class, a school event, or an earlier class date), loads the
fetched roster from JSON, and walks the marking workflow on a `RosterSelectionSession`:
- Toggle individual students with Present / Absent assertions or a plain flip
- Mark the whole roster absent or present, or flip it with the bulk toggle when the school enables it
- Review the selection, then submit or return to editing

Submitting writes the endpoint and request body for the chosen `MarkingTarget` to a JSON file,
standing in for the mark-attendance request. The session is then discarded; a fresh roster file
must be loaded to see the server's marks.

A roster that is already marked is shown as a read-only review.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.path_utils import (
    read_json_if_exists,
    resolve_input_path,
    sibling_path,
    unwrap_rows,
    write_json,
)
from core.importers import import_roster, import_settings
from core.response import ErrorCode, Response
from core.roster_session import RosterSelectionSession
from core.utils import parse_iso_date
from models.marking_target import MarkingTarget
from models.settings import SchoolSettings
from models.student import RosterEntry

SETTINGS_FILENAME = "settings.json"


def run() -> None:
    """
    Top-level entry for the Mark Attendance menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    target = prompt_marking_target()

    if target is None:
        helpers.returning_to("Start Menu")
        return

    loaded = load_session()

    if loaded is None:
        helpers.returning_to("Start Menu")
        return

    session, settings = loaded

    if session.total_count() == 0:
        print("\nNo students found.")
        helpers.returning_to("Start Menu")
        return

    if session.is_locked:
        print(f"\nAttendance already marked for {target}.")
        view_roster(session)
        helpers.returning_to("Start Menu")
        return

    title = formatters.format_banner_text(f"Mark Attendance: {target}")
    options = [
        ("View Roster", view_roster),
        ("Mark a Student", mark_student),
        ("Mark All Absent", lambda s: s.bulk_mark_all_absent()),
        ("Mark All Present", lambda s: s.bulk_mark_all_present()),
    ]

    if settings.default_all_present:
        options.append(("Toggle All (Present / Absent)", lambda s: s.toggle_all()))

    options.append(("Review and Submit", lambda s: review_and_submit(s, target)))
    zero_option = "Discard and return to Start Menu"

    while True:
        menu_response = helpers.display_menu(
            title,
            options,
            zero_option,
            status=lambda: model_formatters.format_session_summary(session),
        )

        if menu_response is MenuSignal.EXIT:
            if helpers.confirm_action("Discard this selection without submitting?"):
                break

        elif callable(menu_response):
            submitted = menu_response(session)

            if submitted is True:
                print("\nLoad the roster again to see the recorded attendance.")
                break

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Start Menu")


# === choosing what to mark ===


def prompt_marking_target() -> MarkingTarget | None:
    title = "What are you marking attendance for?"
    options = [
        ("Today's Class", MarkingTarget.for_class),
        ("A School Event", prompt_event_target),
        ("An Earlier Class Date", prompt_back_dated_target),
    ]

    menu_response = helpers.display_menu(title, options, zero_option="Cancel")

    if menu_response is MenuSignal.EXIT:
        return None

    return menu_response()


def prompt_event_target() -> MarkingTarget | None:
    event_id = helpers.prompt_user_input_or_cancel(
        "Enter the event ID (leave blank to cancel):"
    )

    if event_id is MenuSignal.CANCEL:
        return None

    return MarkingTarget.for_event(str(event_id))


def prompt_back_dated_target() -> MarkingTarget | None:
    while True:
        date_input = helpers.prompt_user_input_or_cancel(
            "Enter the class date (YYYY-MM-DD, leave blank to cancel):"
        )

        if date_input is MenuSignal.CANCEL:
            return None

        try:
            return MarkingTarget.for_date(parse_iso_date(str(date_input)))

        except ValueError as e:
            print(f"\nInvalid date: {e}. Please try again.")


# === loading ===


def load_session() -> tuple[RosterSelectionSession, SchoolSettings] | None:
    """
    Prompts for a roster file and builds a session from it.

    Returns:
        tuple[RosterSelectionSession, SchoolSettings]: The session and the school settings used to order it.
        None: If the user cancels.

    Notes:
        - The roster file may hold a list of rows or a {"rows": [...]} object.
        - Settings are read from a `settings.json` beside the roster file, if present.
    """
    while True:
        file_response = helpers.prompt_json_file_or_cancel("roster")

        if file_response is MenuSignal.CANCEL:
            return None

        file_path, data = file_response

        settings_response = load_settings(file_path)

        if not settings_response:
            helpers.display_response_failure(settings_response)
            continue

        settings = settings_response["settings"]

        roster_response = import_roster(unwrap_rows(data, "rows"), settings.sort_by)

        if not roster_response:
            helpers.display_response_failure(roster_response)
            continue

        return roster_response["session"], settings


def load_settings(roster_path: str) -> Response:
    """
    Reads the school settings stored beside a roster file.

    Returns:
        Response: The result of `import_settings()`. A missing file yields the defaults; a file that
        cannot be read or parsed fails with `ErrorCode.INVALID_INPUT`.
    """
    settings_path = sibling_path(roster_path, SETTINGS_FILENAME)

    try:
        data = read_json_if_exists(settings_path)

    except (OSError, ValueError) as e:
        return Response.fail(
            ErrorCode.INVALID_INPUT,
            f"Could not load school settings from {settings_path}: {e}",
        )

    return import_settings(data)


# === roster views ===


def view_roster(session: RosterSelectionSession) -> None:
    helpers.print_banner("Class Roster")

    helpers.display_results(
        session.entries,
        show_index=True,
        formatter=lambda x: model_formatters.format_roster_entry_oneline(x, session),
    )


def prompt_roster_entry(session: RosterSelectionSession) -> RosterEntry | None:
    helpers.print_banner("Class Roster")

    return helpers.select_from(
        session.entries,
        formatter=lambda x: model_formatters.format_roster_entry_oneline(x, session),
        noun="a student",
    )


# === marking ===


def mark_student(session: RosterSelectionSession) -> None:
    entry = prompt_roster_entry(session)

    if entry is None:
        helpers.returning_without_changes()
        return

    title = f"{entry.student.display_name}:"
    options = [
        ("Present", lambda: False),
        ("Absent", lambda: True),
        ("Flip current mark", lambda: None),
    ]
    zero_option = "Cancel"

    menu_response = helpers.display_menu(title, options, zero_option)

    if menu_response is MenuSignal.EXIT:
        helpers.returning_without_changes()
        return

    session.toggle_absence(entry.enrollment_id, force_absent=menu_response())


# === review and submit ===


def review_and_submit(session: RosterSelectionSession, target: MarkingTarget) -> bool:
    """
    Shows the read-only review and submits on confirmation.

    The written file holds the target's "endpoint" and the request "body".

    Returns:
        bool: True if the selection was submitted, False if the user went back to editing.
    """
    session.begin_confirmation()

    helpers.print_banner(f"Review Before Submitting: {target}")

    helpers.display_results(
        session.entries,
        formatter=lambda x: model_formatters.format_roster_entry_oneline(x, session),
    )
    print(f"\n{model_formatters.format_session_summary(session)}")

    if not helpers.confirm_action("Submit this attendance?"):
        session.cancel_confirmation()
        helpers.returning_to("Mark Attendance menu")
        return False

    payload = session.build_submission_payload()

    while True:
        path_input = helpers.prompt_user_input_or_cancel(
            "Enter the file to write the submission to (leave blank to cancel):"
        )

        if path_input is MenuSignal.CANCEL:
            session.cancel_confirmation()
            helpers.returning_to("Mark Attendance menu")
            return False

        file_path = resolve_input_path(str(path_input))

        try:
            write_json(
                file_path,
                {
                    "endpoint": target.endpoint,
                    "body": payload.to_request_params(target),
                },
            )

        except OSError as e:
            print(f"\nCould not write {file_path}: {e}. Please try again.")
            continue

        print(
            f"\nAttendance submitted: {formatters.format_count(len(payload.absent_student_ids), 'student')} absent out of {len(payload.all_student_ids)}."
        )
        return True
