# core/roster_session.py

"""
Selection state for marking a whole roster present or absent in one batch.

`RosterSelectionSession` is built from one roster fetch and tracks which students the user
has flagged absent before the batch is submitted. It replaces the per-screen absent lists
of the class roster, event roster, and back-dated roster screens with one object.

This enables workflows such as:
    - Toggling individual students with the Present / Absent checkbox pair
    - Marking the whole roster absent or present in one action
    - Reviewing the selection in a read-only confirmation step before submitting
    - Showing a read-only review of a roster that was already marked server-side

The session supports:
    - A lock derived from the fetched statuses: if any student is already marked, the
      roster is read-only and mutations are silent no-ops
    - An explicit `EDITING -> CONFIRMING` phase machine, with wrong-phase calls raising
      `InvalidStateError`
    - Building the `SubmissionPayload` handed to the submission collaborator

The session has no "submitted" phase. After a successful submit, the caller discards it
and creates a new one from a fresh fetch.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from core.errors import InvalidStateError
from core.utils import roll_sort_key
from models.settings import RosterSortKey
from models.student import AttendanceStatus, RosterEntry
from models.submission_payload import SubmissionPayload


class SessionPhase(Enum):
    EDITING = "EDITING"
    CONFIRMING = "CONFIRMING"


class RosterSelectionSession:
    """
    A staging object for one roster's absent/present selection, keyed by enrollment ID.

    Notes:
        - `entries` keeps the order given at creation; that order is the display order
          and the order of every ID sequence the session produces.
        - The absent set is stored as a `set[str]`; counts are recomputed from it on each call.
        - Use `create()` rather than the constructor.
    """

    def __init__(self, entries: Sequence[RosterEntry]):
        self._entries: tuple[RosterEntry, ...] = tuple(entries)
        self._roster_ids: frozenset[str] = frozenset(
            entry.enrollment_id for entry in self._entries
        )
        self._locked: bool = any(entry.is_marked for entry in self._entries)
        self._server_statuses: dict[str, AttendanceStatus] = {
            entry.enrollment_id: entry.status for entry in self._entries
        }
        self._absent_ids: set[str] = {
            entry.enrollment_id
            for entry in self._entries
            if entry.status == AttendanceStatus.ABSENT
        }
        self._phase: SessionPhase = SessionPhase.EDITING

    # === public classmethods ===

    @classmethod
    def create(cls, entries: Iterable[RosterEntry]) -> RosterSelectionSession:
        """
        Creates a session from the entries of one roster fetch.

        Args:
            entries (Iterable[RosterEntry]): The fetched roster, in display order.

        Returns:
            RosterSelectionSession: A new session in the `EDITING` phase.

        Raises:
            ValueError: If two entries share an enrollment ID.

        Notes:
            - The roster is locked if any entry is not `UNMARKED`. Every entry is inspected,
              so a partially marked roster is still detected.
            - The absent set is seeded from every `ABSENT` entry whether or not the roster is
              locked, so a locked session mirrors the server's marks exactly.
        """
        entries = tuple(entries)

        seen: set[str] = set()
        for entry in entries:
            if entry.enrollment_id in seen:
                raise ValueError(
                    f"Duplicate enrollment ID in roster: {entry.enrollment_id}"
                )
            seen.add(entry.enrollment_id)

        return cls(entries)

    # === properties ===

    @property
    def entries(self) -> tuple[RosterEntry, ...]:
        return self._entries

    @property
    def absent_ids(self) -> frozenset[str]:
        return frozenset(self._absent_ids)

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def is_locked(self) -> bool:
        return self._locked

    @property
    def is_confirming(self) -> bool:
        return self._phase is SessionPhase.CONFIRMING

    # === data accessors ===

    def total_count(self) -> int:
        return len(self._entries)

    def absent_count(self) -> int:
        return len(self._absent_ids)

    def present_count(self) -> int:
        return self.total_count() - self.absent_count()

    def is_absent(self, enrollment_id: str) -> bool:
        return enrollment_id in self._absent_ids

    def status_of(self, enrollment_id: str) -> AttendanceStatus:
        """
        Returns the status a student would be shown with on the review card.

        Notes:
            - On an unlocked session, every student is `PRESENT` or `ABSENT` per the selection.
            - On a locked session, the status the server reported is returned unchanged, so a
              student left unmarked on a partially marked roster stays `UNMARKED`.

        Raises:
            ValueError: If the enrollment ID is not on the roster.
        """
        self._require_on_roster(enrollment_id)

        if self._locked:
            return self._server_statuses[enrollment_id]

        if enrollment_id in self._absent_ids:
            return AttendanceStatus.ABSENT

        return AttendanceStatus.PRESENT

    def ordered_absent_ids(self) -> list[str]:
        return [
            entry.enrollment_id
            for entry in self._entries
            if entry.enrollment_id in self._absent_ids
        ]

    # === data manipulators ===

    def toggle_absence(
        self, enrollment_id: str, force_absent: bool | None = None
    ) -> None:
        """
        Flags or unflags one student as absent.

        Args:
            enrollment_id (str): The student to update.
            force_absent (bool | None): True asserts absent, False asserts present, None flips
                the current membership.

        Raises:
            InvalidStateError: If the session is confirming.
            ValueError: If the enrollment ID is not on the roster.

        Notes:
            - No-op on a locked session.
        """
        if self._locked:
            return

        self._require_editing("toggle_absence")
        self._require_on_roster(enrollment_id)

        if force_absent is None:
            force_absent = enrollment_id not in self._absent_ids

        if force_absent:
            self._absent_ids.add(enrollment_id)
        else:
            self._absent_ids.discard(enrollment_id)

    def bulk_mark_all_absent(self) -> None:
        if self._locked:
            return

        self._require_editing("bulk_mark_all_absent")
        self._absent_ids = set(self._roster_ids)

    def bulk_mark_all_present(self) -> None:
        if self._locked:
            return

        self._require_editing("bulk_mark_all_present")
        self._absent_ids.clear()

    def toggle_all(self) -> None:
        """
        Flips the whole roster between all-present and all-absent.

        If every student is currently present, marks everyone absent; otherwise marks everyone
        present. No-op on a locked session.

        Raises:
            InvalidStateError: If the session is confirming.
        """
        if self._locked:
            return

        self._require_editing("toggle_all")

        if not self._absent_ids:
            self.bulk_mark_all_absent()
        else:
            self.bulk_mark_all_present()

    # --- phase transitions ---

    def begin_confirmation(self) -> None:
        """
        Moves the session into the read-only `CONFIRMING` phase.

        Raises:
            InvalidStateError: If the roster is locked (already marked) or empty.
        """
        if self._locked:
            raise InvalidStateError("Attendance for this roster is already marked.")

        if not self._entries:
            raise InvalidStateError("Cannot confirm attendance for an empty roster.")

        self._phase = SessionPhase.CONFIRMING

    def cancel_confirmation(self) -> None:
        if self._phase is SessionPhase.CONFIRMING:
            self._phase = SessionPhase.EDITING

    def build_submission_payload(self) -> SubmissionPayload:
        """
        Builds the payload for the submission collaborator.

        Returns:
            SubmissionPayload: Every roster ID and the absent IDs, both in roster order.

        Raises:
            InvalidStateError: If the session is not confirming.
        """
        if self._phase is not SessionPhase.CONFIRMING:
            raise InvalidStateError(
                "A submission payload can only be built while confirming."
            )

        return SubmissionPayload(
            all_student_ids=[entry.enrollment_id for entry in self._entries],
            absent_student_ids=self.ordered_absent_ids(),
        )

    # === data validators ===

    def _require_editing(self, operation: str) -> None:
        if self._phase is not SessionPhase.EDITING:
            raise InvalidStateError(
                f"Cannot call {operation}() while the session is {self._phase.value}."
            )

    def _require_on_roster(self, enrollment_id: str) -> None:
        if enrollment_id not in self._roster_ids:
            raise ValueError(f"Student is not on this roster: {enrollment_id}")

    # === dunder methods ===

    def __repr__(self) -> str:
        lock = "locked" if self._locked else "unlocked"
        return f"RosterSelectionSession({self.present_count()}/{self.total_count()} present, {lock}, {self._phase.value})"


def sort_roster_entries(
    entries: Iterable[RosterEntry], sort_by: RosterSortKey
) -> list[RosterEntry]:
    """
    Orders roster entries by one of the school's roster sort options.

    Args:
        entries (Iterable[RosterEntry]): The entries to order.
        sort_by (RosterSortKey): Name (case-insensitive), roll number (numeric rolls in
            numeric order), or enrollment ID.

    Returns:
        list[RosterEntry]: A new list; ties keep their input order.
    """
    match sort_by:
        case RosterSortKey.NAME:
            return sorted(entries, key=lambda x: x.student.display_name.casefold())
        case RosterSortKey.ROLL:
            return sorted(entries, key=lambda x: roll_sort_key(x.student.roll_number))
        case RosterSortKey.ENROLLMENT:
            return sorted(entries, key=lambda x: x.enrollment_id)
        case _:
            raise ValueError(f"Unrecognized roster sort key: {sort_by}")
