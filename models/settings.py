# models/settings.py

"""
Per-school settings that shape the attendance marking screen.

Stored server-side alongside the school profile and read back as a flat dictionary:
- "defaultAttendanceStatus": "yes" enables the all-present / all-absent bulk toggle.
- "sortstudentsby": the roster order ("name", "roll", or "enroll").
"""

from __future__ import annotations

from enum import Enum


class RosterSortKey(str, Enum):
    NAME = "name"
    ROLL = "roll"
    ENROLLMENT = "enroll"


class SchoolSettings:

    def __init__(
        self,
        default_all_present: bool = False,
        sort_by: RosterSortKey = RosterSortKey.NAME,
    ):
        self._default_all_present: bool = default_all_present
        self._sort_by: RosterSortKey = sort_by

    # === properties ===

    @property
    def default_all_present(self) -> bool:
        return self._default_all_present

    @property
    def sort_by(self) -> RosterSortKey:
        return self._sort_by

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "defaultAttendanceStatus": "yes" if self._default_all_present else "no",
            "sortstudentsby": self._sort_by.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SchoolSettings:
        default_status = str(data.get("defaultAttendanceStatus") or "").strip().lower()
        sort_by = str(data.get("sortstudentsby") or RosterSortKey.NAME.value).strip().lower()

        return cls(
            default_all_present=default_status == "yes",
            sort_by=RosterSortKey(sort_by),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"SchoolSettings({self._default_all_present}, {self._sort_by.value})"
