from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One subject/date/status observation for a student."""

    subject_id: Optional[str]
    subject_name: str
    status: AttendanceStatus
    date: Optional[date] = None
    subject_code: Optional[str] = None


@dataclass(frozen=True)
class SubjectAttendanceGroup:
    """All records of one subject, in encounter order."""

    subject_id: str
    subject_name: str
    subject_code: Optional[str]
    sessions: int
    present: int
    records: tuple[AttendanceRecord, ...] = ()

    @property
    def absent(self) -> int:
        return self.sessions - self.present


@dataclass(frozen=True)
class SubjectSummary:
    """Read-model for the per-subject table and bar chart."""

    subject_id: str
    subject_name: str
    subject_code: Optional[str]
    present: int
    sessions: int
    percentage: float
