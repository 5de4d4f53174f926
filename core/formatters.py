# core/formatters.py

# all pure utilities & date/datetime helpers
# must never import from models!

import calendar
import datetime

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_count(count: int, singular: str, plural: str | None = None) -> str:
    noun = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {noun}"


# === date formatters ===


def format_month_and_year(class_date: datetime.date) -> str:
    line = "-" * 20
    month_and_year = class_date.strftime("%B %Y")
    return f"{line}\n{month_and_year}\n{line}"


def month_weeks(year: int, month: int) -> list[list[datetime.date | None]]:
    """
    Lays out one month as weeks starting on Sunday, padding with None outside the month.
    """
    cal = calendar.Calendar(firstweekday=calendar.SUNDAY)

    return [
        [day if day.month == month else None for day in week]
        for week in cal.monthdatescalendar(year, month)
    ]

