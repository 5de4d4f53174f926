# models/marking_target.py

"""
What a roster is being marked for: today's class, a school event, or an earlier class date.

All three rosters share the same selection workflow and the same submission body. The target
adds the endpoint to post to and the one extra field that identifies the event or the date.
"""

from __future__ import annotations

import datetime
from enum import Enum


class MarkingKind(str, Enum):
    CLASS = "class"
    EVENT = "event"
    BACK_DATED = "back_dated"


_ENDPOINTS: dict[MarkingKind, str] = {
    MarkingKind.CLASS: "/mark-student-attendance",
    MarkingKind.EVENT: "/mark-student-event-attendance",
    MarkingKind.BACK_DATED: "/mark-student-attendance-back",
}


class MarkingTarget:
    """
    Use the `for_class()`, `for_event()` and `for_date()` constructors.
    """

    def __init__(
        self,
        kind: MarkingKind,
        event_id: str | None = None,
        attendance_date: datetime.date | None = None,
    ):
        if kind is MarkingKind.EVENT and not event_id:
            raise ValueError("Event attendance requires an event ID.")

        if kind is MarkingKind.BACK_DATED and attendance_date is None:
            raise ValueError("Back-dated attendance requires an attendance date.")

        self._kind: MarkingKind = kind
        self._event_id: str | None = event_id if kind is MarkingKind.EVENT else None
        self._attendance_date: datetime.date | None = (
            attendance_date if kind is MarkingKind.BACK_DATED else None
        )

    # === public classmethods ===

    @classmethod
    def for_class(cls) -> MarkingTarget:
        return cls(MarkingKind.CLASS)

    @classmethod
    def for_event(cls, event_id: str) -> MarkingTarget:
        return cls(MarkingKind.EVENT, event_id=str(event_id).strip())

    @classmethod
    def for_date(cls, attendance_date: datetime.date) -> MarkingTarget:
        """
        Raises:
            ValueError: If the date is in the future.
        """
        if attendance_date > datetime.date.today():
            raise ValueError("Attendance cannot be marked for a future date.")

        return cls(MarkingKind.BACK_DATED, attendance_date=attendance_date)

    # === properties ===

    @property
    def kind(self) -> MarkingKind:
        return self._kind

    @property
    def event_id(self) -> str | None:
        return self._event_id

    @property
    def attendance_date(self) -> datetime.date | None:
        return self._attendance_date

    @property
    def endpoint(self) -> str:
        return _ENDPOINTS[self._kind]

    # === persistence and import ===

    def request_params(self) -> dict:
        """
        Returns the fields this target adds to the submission body.

        Notes:
            - Class marking adds nothing.
            - Event marking adds "eventid"; back-dated marking adds "attendancedate" as YYYY-MM-DD.
        """
        match self._kind:
            case MarkingKind.EVENT:
                return {"eventid": self._event_id}
            case MarkingKind.BACK_DATED:
                return {"attendancedate": self._attendance_date.isoformat()}
            case _:
                return {}

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarkingTarget):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._event_id == other._event_id
            and self._attendance_date == other._attendance_date
        )

    def __hash__(self) -> int:
        return hash((self._kind, self._event_id, self._attendance_date))

    def __str__(self) -> str:
        match self._kind:
            case MarkingKind.EVENT:
                return f"Event {self._event_id}"
            case MarkingKind.BACK_DATED:
                return f"Class on {self._attendance_date.isoformat()}"
            case _:
                return "Today's class"
