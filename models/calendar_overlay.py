# models/calendar_overlay.py

"""
Represents the reconciled view of one student's attendance calendar for one month.

A `CalendarOverlay` maps each tagged calendar date to a single `DayTag` and carries the
present/absent totals shown in the calendar legend. It is built fresh for each
(student, month) query by `core.calendar_reconciler` and is never mutated afterwards.
"""

from __future__ import annotations

import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class DayTag(str, Enum):
    HOLIDAY_ALL = "holiday_all"
    HOLIDAY_CELEBRATION = "holiday_celebration"
    HOLIDAY_CLASS = "holiday_class"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def is_holiday(self) -> bool:
        return self in (
            DayTag.HOLIDAY_ALL,
            DayTag.HOLIDAY_CELEBRATION,
            DayTag.HOLIDAY_CLASS,
        )


class CalendarOverlay:

    def __init__(
        self,
        days: Mapping[datetime.date, DayTag],
        present_count: int = 0,
        absent_count: int = 0,
    ):
        self._days: Mapping[datetime.date, DayTag] = MappingProxyType(dict(days))
        self._present_count: int = present_count
        self._absent_count: int = absent_count

    # === properties ===

    @property
    def days(self) -> Mapping[datetime.date, DayTag]:
        return self._days

    @property
    def present_count(self) -> int:
        return self._present_count

    @property
    def absent_count(self) -> int:
        return self._absent_count

    # === data accessors ===

    def tag_on(self, date: datetime.date) -> DayTag | None:
        return self._days.get(date)

    def dates_tagged(self, tag: DayTag) -> list[datetime.date]:
        return sorted(date for date, day_tag in self._days.items() if day_tag == tag)

    def is_empty(self) -> bool:
        return not self._days

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "days": {
                date.isoformat(): tag.value for date, tag in sorted(self._days.items())
            },
            "present_count": self._present_count,
            "absent_count": self._absent_count,
        }

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"CalendarOverlay({len(self._days)} days, present={self._present_count}, absent={self._absent_count})"
