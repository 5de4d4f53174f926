# models/submission_payload.py

"""
The unit handed to the attendance submission collaborator.

Built by `RosterSelectionSession.build_submission_payload()` while a session is confirming.
Both ID sequences follow roster (fetch) order, and every absent ID is also a roster ID.
"""

from __future__ import annotations

from collections.abc import Iterable

from models.marking_target import MarkingTarget


class SubmissionPayload:

    def __init__(
        self,
        all_student_ids: Iterable[str],
        absent_student_ids: Iterable[str],
    ):
        self._all_student_ids: tuple[str, ...] = tuple(all_student_ids)
        self._absent_student_ids: tuple[str, ...] = tuple(absent_student_ids)

    # === properties ===

    @property
    def all_student_ids(self) -> tuple[str, ...]:
        return self._all_student_ids

    @property
    def absent_student_ids(self) -> tuple[str, ...]:
        return self._absent_student_ids

    @property
    def present_student_ids(self) -> tuple[str, ...]:
        absent = set(self._absent_student_ids)
        return tuple(id for id in self._all_student_ids if id not in absent)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "all_student_ids": list(self._all_student_ids),
            "absent_student_ids": list(self._absent_student_ids),
        }

    def to_request_params(self, target: MarkingTarget | None = None) -> dict:
        """
        Maps the payload onto the field names used by the mark-attendance endpoints.

        Args:
            target (MarkingTarget | None): The event or earlier date being marked. None is today's class.

        Returns:
            dict: "studentsforattendance" and "absentstudents" lists, the "astatus" marker telling
            the endpoint that the listed students are the absent ones, and any field the target adds
            ("eventid" or "attendancedate").
        """
        params = {
            "studentsforattendance": list(self._all_student_ids),
            "absentstudents": list(self._absent_student_ids),
            "astatus": "absent",
        }

        if target is not None:
            params.update(target.request_params())

        return params

    @classmethod
    def from_dict(cls, data: dict) -> SubmissionPayload:
        return cls(
            all_student_ids=data["all_student_ids"],
            absent_student_ids=data.get("absent_student_ids", []),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubmissionPayload):
            return NotImplemented
        return (
            self._all_student_ids == other._all_student_ids
            and self._absent_student_ids == other._absent_student_ids
        )

    def __hash__(self) -> int:
        return hash((self._all_student_ids, self._absent_student_ids))

    def __repr__(self) -> str:
        return f"SubmissionPayload(all={list(self._all_student_ids)}, absent={list(self._absent_student_ids)})"
