# models/holiday.py

"""
Represents one holiday definition from a branch's holiday calendar.

A holiday is fetched once per branch and shared across all students. Whether it applies
to a given student depends on its category and, for student holidays, on the class IDs
it is restricted to:
- `FOR_ALL` and `CELEBRATION` apply to every student.
- `FOR_STUDENTS` applies to every class when `applicable_class_ids` is empty, otherwise
  only to the listed classes.
- `FOR_STAFF` is a staff-only holiday and never applies to a student.

The server stores the class restriction as a comma-separated "subcat" string, which
`from_dict()` splits into a frozenset of class ID strings.
"""

from __future__ import annotations

import datetime
from enum import Enum

from core.utils import parse_iso_date, split_csv_ids


class HolidayCategory(str, Enum):
    FOR_ALL = "forall"
    CELEBRATION = "celebration"
    FOR_STUDENTS = "forstudents"
    FOR_STAFF = "forstaff"


class HolidayRecord:

    def __init__(
        self,
        date: datetime.date,
        category: HolidayCategory,
        applicable_class_ids: frozenset[str] | None = None,
    ):
        self._date: datetime.date = date
        self._category: HolidayCategory = category
        self._applicable_class_ids: frozenset[str] = frozenset(
            str(class_id) for class_id in (applicable_class_ids or ())
        )

    # === properties ===

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def category(self) -> HolidayCategory:
        return self._category

    @property
    def applicable_class_ids(self) -> frozenset[str]:
        return self._applicable_class_ids

    # === data accessors ===

    def applies_to(self, class_id: str | int | None) -> bool:
        """
        Checks whether this holiday applies to a student in the given class.

        Args:
            class_id (str | int | None): The student's class ID. Compared as a string.

        Returns:
            bool: True if the holiday should be shown on the student's calendar.
        """
        match self._category:
            case HolidayCategory.FOR_ALL | HolidayCategory.CELEBRATION:
                return True

            case HolidayCategory.FOR_STUDENTS:
                if not self._applicable_class_ids:
                    return True
                return class_id is not None and str(class_id) in self._applicable_class_ids

            case _:
                return False

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "dat": self._date.isoformat(),
            "category": self._category.value,
            "subcat": ",".join(sorted(self._applicable_class_ids)),
        }

    @classmethod
    def from_dict(cls, data: dict) -> HolidayRecord:
        return cls(
            date=parse_iso_date(data["dat"]),
            category=HolidayCategory(str(data["category"]).strip().lower()),
            applicable_class_ids=split_csv_ids(data.get("subcat")),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        class_ids = ",".join(sorted(self._applicable_class_ids)) or "*"
        return f"HolidayRecord({self._date.isoformat()}, {self._category.value}, {class_ids})"
