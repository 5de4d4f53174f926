# core/calendar_reconciler.py

"""
Merges one student's month of attendance with the branch holiday calendar.

The reconciler produces one `DayTag` per tagged date and the present/absent totals for the
calendar legend. Rules are applied in a fixed order:
    1. Holidays that apply to the student's class tag their dates. When two holidays share a
       date, the later one in the input wins.
    2. Every `PRESENT` record tags its date `PRESENT` and is counted, overriding any holiday.
    3. Every `ABSENT` record is counted and tags its date `ABSENT`, unless the date already
       carries a holiday tag, in which case the holiday tag stays and nothing is counted.

Records whose status is neither present nor absent are ignored. Reconciling never raises.
"""

from collections.abc import Iterable

from models.calendar_overlay import CalendarOverlay, DayTag
from models.day_record import DayRecord
from models.holiday import HolidayCategory, HolidayRecord
from models.student import AttendanceStatus

_HOLIDAY_TAGS: dict[HolidayCategory, DayTag] = {
    HolidayCategory.FOR_ALL: DayTag.HOLIDAY_ALL,
    HolidayCategory.CELEBRATION: DayTag.HOLIDAY_CELEBRATION,
    HolidayCategory.FOR_STUDENTS: DayTag.HOLIDAY_CLASS,
}


class AttendanceCalendarReconciler:
    """
    Holds one branch's holiday calendar and reconciles student months against it.

    The holiday list is fetched once per branch and shared across students; applicability
    is decided per call from the student's class ID.
    """

    def __init__(self, holidays: Iterable[HolidayRecord] = ()):
        self._holidays: tuple[HolidayRecord, ...] = tuple(holidays)

    @property
    def holidays(self) -> tuple[HolidayRecord, ...]:
        return self._holidays

    def reconcile(
        self,
        day_records: Iterable[DayRecord],
        class_id: str | int | None = None,
    ) -> CalendarOverlay:
        """
        Builds the calendar overlay for one student and one month.

        Args:
            day_records (Iterable[DayRecord]): The student's attendance records for the month.
            class_id (str | int | None): The student's class ID, used for class-restricted holidays.

        Returns:
            CalendarOverlay: The per-day tags plus present and absent counts.
        """
        day_records = tuple(day_records)
        days = {}
        present_count = 0
        absent_count = 0

        for holiday in self._holidays:
            tag = _HOLIDAY_TAGS.get(holiday.category)
            if tag is not None and holiday.applies_to(class_id):
                days[holiday.date] = tag

        for record in day_records:
            if record.status == AttendanceStatus.PRESENT:
                days[record.date] = DayTag.PRESENT
                present_count += 1

        for record in day_records:
            if record.status != AttendanceStatus.ABSENT:
                continue

            current = days.get(record.date)
            if current is not None and current.is_holiday:
                continue

            days[record.date] = DayTag.ABSENT
            absent_count += 1

        return CalendarOverlay(
            days=days,
            present_count=present_count,
            absent_count=absent_count,
        )


def reconcile(
    day_records: Iterable[DayRecord],
    holidays: Iterable[HolidayRecord],
    class_id: str | int | None = None,
) -> CalendarOverlay:
    return AttendanceCalendarReconciler(holidays).reconcile(day_records, class_id)
