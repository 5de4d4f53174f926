# models/day_record.py

"""
Represents one calendar day's attendance fact for a single student, as returned by
the attendance-history fetch for one month.
"""

from __future__ import annotations

import datetime

from core.utils import parse_iso_date
from models.student import AttendanceStatus


class DayRecord:

    def __init__(self, date: datetime.date, status: AttendanceStatus):
        self._date: datetime.date = date
        self._status: AttendanceStatus = status

    # === properties ===

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def status(self) -> AttendanceStatus:
        return self._status

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "date": self._date.isoformat(),
            "status": self._status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> DayRecord:
        return cls(
            date=parse_iso_date(data["date"]),
            status=AttendanceStatus.parse(data.get("status")),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayRecord):
            return NotImplemented
        return self._date == other._date and self._status == other._status

    def __hash__(self) -> int:
        return hash((self._date, self._status))

    def __repr__(self) -> str:
        return f"DayRecord({self._date.isoformat()}, {self._status.value})"
