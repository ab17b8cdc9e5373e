from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceSource(Protocol):
    def get_for_student(self, student_id: str) -> Optional[Sequence[AttendanceRecord]]:
        """Current attendance snapshot of a student, or None if the student is unknown."""

        raise NotImplementedError
