# core/importers.py

"""
Translates raw rows from the fetch collaborators into attendance core objects.

The roster import is strict: a session can only be submitted for a complete roster, so a
single bad row fails the whole import. Attendance-history and holiday imports are lenient:
calendar rendering should survive a partial server response, so bad rows are skipped and
counted instead.

Every function returns a `Response` and never raises.
"""

from typing import Any, Callable, TypeVar

from core.response import ErrorCode, Response
from core.roster_session import RosterSelectionSession, sort_roster_entries
from models.day_record import DayRecord
from models.holiday import HolidayRecord
from models.settings import RosterSortKey, SchoolSettings
from models.student import RosterEntry

RowType = TypeVar("RowType", DayRecord, HolidayRecord)


def import_roster(rows: Any, sort_by: RosterSortKey | None = None) -> Response:
    """
    Builds a `RosterSelectionSession` from the rows of one roster fetch.

    Args:
        rows (Any): The fetched rows; expected to be a list of dictionaries.
        sort_by (RosterSortKey | None): If provided, entries are ordered with
            `sort_roster_entries()` first. Otherwise the fetch order is kept.

    Returns:
        Response: Truthy if every row parsed and the roster is valid.
            - On success, `response["session"]` is the new `RosterSelectionSession`.
            - On failure, `error` is one of:
                - `ErrorCode.INVALID_INPUT` if `rows` is not a list of dictionaries.
                - `ErrorCode.MISSING_REQUIRED_FIELD` if a row has no "enrollment" key.
                - `ErrorCode.INVALID_FIELD_VALUE` if a row has a blank enrollment ID or unknown status.
                - `ErrorCode.VALIDATION_FAILED` if two rows share an enrollment ID.
                - `ErrorCode.INTERNAL_ERROR` for anything else a row raises.

    Notes:
        - An empty list is a valid, empty roster.
    """
    if not _is_row_list(rows):
        return Response.fail(
            ErrorCode.INVALID_INPUT,
            "Expected the roster to be a list of rows.",
        )

    entries = []

    for row in rows:
        try:
            entries.append(RosterEntry.from_dict(row))

        except KeyError as e:
            return Response.fail(
                ErrorCode.MISSING_REQUIRED_FIELD,
                f"Missing required field {e} in roster row: {row}",
            )

        except ValueError as e:
            return Response.fail(
                ErrorCode.INVALID_FIELD_VALUE,
                f"Invalid field value in roster row: {row} - {e}",
            )

        except Exception as e:
            return Response.fail(
                ErrorCode.INTERNAL_ERROR,
                f"Unexpected error: {e}",
            )

    if sort_by is not None:
        entries = sort_roster_entries(entries, sort_by)

    try:
        session = RosterSelectionSession.create(entries)

    except ValueError as e:
        return Response.fail(
            ErrorCode.VALIDATION_FAILED,
            f"Roster validation failed: {e}",
        )

    return Response.succeed(session=session)


def import_day_records(rows: Any) -> Response:
    """
    Parses one student's monthly attendance rows, skipping malformed ones.

    Returns:
        Response: On success, `response["records"]` is a list[DayRecord] and `response["skipped"]` an int.
        Fails with `ErrorCode.INVALID_INPUT` only if `rows` is not a list.
    """
    return _import_lenient(rows, DayRecord.from_dict, "attendance records")


def import_holidays(rows: Any) -> Response:
    """
    Parses a branch's holiday rows, skipping malformed ones.

    Returns:
        Response: On success, `response["records"]` is a list[HolidayRecord] and `response["skipped"]` an int.
        Fails with `ErrorCode.INVALID_INPUT` only if `rows` is not a list.
    """
    return _import_lenient(rows, HolidayRecord.from_dict, "holidays")


def import_settings(data: Any) -> Response:
    if data is None:
        data = {}

    if not isinstance(data, dict):
        return Response.fail(
            ErrorCode.INVALID_INPUT,
            "Expected the school settings to be a dictionary.",
        )

    try:
        settings = SchoolSettings.from_dict(data)

    except ValueError as e:
        return Response.fail(
            ErrorCode.INVALID_FIELD_VALUE,
            f"Invalid school setting: {e}",
        )

    return Response.succeed(settings=settings)


# === helper methods ===


def _is_row_list(rows: Any) -> bool:
    return isinstance(rows, list) and all(isinstance(row, dict) for row in rows)


def _import_lenient(
    rows: Any,
    from_dict_fn: Callable[[dict[str, Any]], RowType],
    record_name: str,
) -> Response:
    if not isinstance(rows, list):
        return Response.fail(
            ErrorCode.INVALID_INPUT,
            f"Expected {record_name} to be a list of rows.",
        )

    records = []
    skipped = 0

    for row in rows:
        if not isinstance(row, dict):
            skipped += 1
            continue

        try:
            records.append(from_dict_fn(row))
        except (KeyError, ValueError, TypeError):
            skipped += 1

    return Response.succeed(records=records, skipped=skipped)
