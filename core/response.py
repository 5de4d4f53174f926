# core/response.py

"""
Outcome objects for the import boundary.

Importers translate rows from the fetch collaborators and can fail on bad data. Instead of
raising, they return a `Response`: a success flag, a machine-readable `ErrorCode`, a message
for the user, and the objects that were built.

    response = import_roster(rows)
    if not response:
        display_response_failure(response)
    else:
        session = response["session"]
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    # === Input Failures ===
    # payload is not the expected shape (e.g. not a list of rows)
    INVALID_INPUT = "INVALID_INPUT"

    # a row is missing a required key (e.g. "enrollment", "dat")
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # a field is present but unparseable (bad date, unknown status or category)
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # the rows parse, but together break a roster rule (duplicate enrollment IDs)
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Result of an import.

    Attributes:
        success (bool): Whether the import produced usable objects.
        detail (str | None): Human-readable explanation of a failure.
        error (ErrorCode | None): Machine-readable failure reason.
        data (dict[str, Any]): The built objects, keyed by name. Empty on failure.

    Notes:
        - A `Response` is truthy exactly when it succeeded.
        - `response[key]` is shorthand for `response.data[key]`.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        data: dict[str, Any] | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(cls, **data: Any) -> Response:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ErrorCode, detail: str) -> Response:
        return cls(success=False, detail=detail, error=error)

    # === dunder methods ===

    def __bool__(self) -> bool:
        return self._success

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __repr__(self) -> str:
        if self._success:
            return f"Response(success, keys={sorted(self._data)})"
        return f"Response(failed, {self._error.value if self._error else None})"

    def __str__(self) -> str:
        if self._success:
            return "Success"
        return f"Error: {self._error.value if self._error else 'UNKNOWN'} - {self._detail}"
