# core/utils.py

"""
Repository for program-wide utilities.
"""

import datetime


def parse_iso_date(date_str: str) -> datetime.date:
    """
    Parses a server date string into a `datetime.date`.

    Accepts "YYYY-MM-DD" and ignores any time component ("YYYY-MM-DDTHH:MM:SS" or "YYYY-MM-DD HH:MM:SS").

    Raises:
        ValueError: If the string does not start with a valid ISO date.
    """
    return datetime.date.fromisoformat(str(date_str).strip()[:10])


def split_csv_ids(raw: str | None) -> frozenset[str]:
    if not raw:
        return frozenset()

    return frozenset(part.strip() for part in str(raw).split(",") if part.strip())


def roll_sort_key(roll_number: str) -> tuple[int, int, str]:
    # numeric rolls first, in numeric order; anything else after, alphabetically
    stripped = roll_number.strip()

    if stripped.isdigit():
        return (0, int(stripped), "")

    return (1, 0, stripped.lower())
