from __future__ import annotations

from datetime import date

import pytest

from src.student_attendance.student_attendance.attendance.model import AttendanceRecord
from src.student_attendance.student_attendance.core.enums import AttendanceStatus


@pytest.fixture
def make_record():
    def _make(subject_id="S1", status=AttendanceStatus.PRESENT, *, name=None, code=None, day=1):
        return AttendanceRecord(
            subject_id=subject_id,
            subject_name=name or (f"Subject {subject_id}" if subject_id else ""),
            subject_code=code,
            date=date(2024, 3, day),
            status=status,
        )

    return _make


@pytest.fixture
def interleaved(make_record):
    P, A = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT
    return [
        make_record("S1", P, name="Maths", code="M101", day=1),
        make_record("S2", A, name="Physics", code="P101", day=1),
        make_record("S1", A, name="Maths", code="M101", day=2),
        make_record("S2", P, name="Physics", code="P101", day=2),
        make_record("S1", P, name="Maths", code="M101", day=3),
    ]
