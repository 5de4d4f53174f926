# models/student.py

"""
Represents a student on a class roster and the attendance state reported for them.

`StudentRef` is the immutable identity of a student as returned by a roster fetch:
enrollment ID, roll number, and display name. It is used as a dictionary and set key
throughout the attendance core, so equality and hashing use the enrollment ID only.

`RosterEntry` pairs a `StudentRef` with the `AttendanceStatus` the server reported for
that student at fetch time. Entries are never mutated; a new fetch replaces the whole set.

Includes functionality for:
- Parsing server attendance status strings
- Serializing to and from JSON-compatible dictionaries (server roster rows)
"""

from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    UNMARKED = "unmarked"

    @classmethod
    def parse(cls, value: str | None) -> AttendanceStatus:
        """
        Converts a raw server status string into an `AttendanceStatus`.

        Args:
            value (str | None): The raw status value, e.g. "present" or "Absent".

        Returns:
            AttendanceStatus: The matching status. Missing or blank values are `UNMARKED`.

        Raises:
            ValueError: If the value is not a recognized status.
        """
        if value is None:
            return cls.UNMARKED

        normalized = str(value).strip().lower()

        if normalized == "":
            return cls.UNMARKED

        return cls(normalized)


class StudentRef:

    def __init__(
        self,
        enrollment_id: str,
        roll_number: str = "",
        display_name: str = "",
    ):
        if not enrollment_id:
            raise ValueError("A student must have a non-empty enrollment ID.")

        self._enrollment_id: str = enrollment_id
        self._roll_number: str = roll_number
        self._display_name: str = display_name

    # === properties ===

    @property
    def enrollment_id(self) -> str:
        return self._enrollment_id

    @property
    def roll_number(self) -> str:
        return self._roll_number

    @property
    def display_name(self) -> str:
        return self._display_name

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "enrollment": self._enrollment_id,
            "roll": self._roll_number,
            "name": self._display_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> StudentRef:
        """
        Builds a `StudentRef` from a server roster row.

        Args:
            data (dict): A row with an "enrollment" key and optional "roll" and "name" keys.
                Rows without "name" fall back to "firstname" and "lastname".

        Returns:
            StudentRef: The parsed student identity.

        Raises:
            KeyError: If the "enrollment" key is missing.
            ValueError: If the enrollment ID is blank.
        """
        name = data.get("name")

        if not name:
            parts = [str(data.get("firstname") or ""), str(data.get("lastname") or "")]
            name = " ".join(part.strip() for part in parts if part.strip())

        roll = data.get("roll")

        return cls(
            enrollment_id=str(data["enrollment"]).strip(),
            roll_number="" if roll is None else str(roll).strip(),
            display_name=str(name),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentRef):
            return NotImplemented
        return self._enrollment_id == other._enrollment_id

    def __hash__(self) -> int:
        return hash(self._enrollment_id)

    def __repr__(self) -> str:
        return f"StudentRef({self._enrollment_id}, {self._roll_number}, {self._display_name})"

    def __str__(self) -> str:
        return f"STUDENT: {self._display_name} - (ID: {self._enrollment_id})"


class RosterEntry:

    def __init__(
        self,
        student: StudentRef,
        status: AttendanceStatus = AttendanceStatus.UNMARKED,
    ):
        self._student: StudentRef = student
        self._status: AttendanceStatus = status

    # === properties ===

    @property
    def student(self) -> StudentRef:
        return self._student

    @property
    def enrollment_id(self) -> str:
        return self._student.enrollment_id

    @property
    def status(self) -> AttendanceStatus:
        return self._status

    @property
    def is_marked(self) -> bool:
        return self._status != AttendanceStatus.UNMARKED

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            **self._student.to_dict(),
            "status": self._status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RosterEntry:
        return cls(
            student=StudentRef.from_dict(data),
            status=AttendanceStatus.parse(data.get("status")),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RosterEntry):
            return NotImplemented
        return self._student == other._student and self._status == other._status

    def __hash__(self) -> int:
        return hash((self._student, self._status))

    def __repr__(self) -> str:
        return f"RosterEntry({self._student!r}, {self._status.value})"
