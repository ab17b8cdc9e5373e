from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..common.datetime_utils import format_detail_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from . import aggregator
from .model import AttendanceRecord, SubjectAttendanceGroup
from .repository import AttendanceSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceView:
    has_records: bool
    overall_percentage: float
    overall_band: str
    subjects: list[dict]


class StudentAttendanceService:
    """Read-models for the student attendance table and charts."""

    def __init__(self, source: AttendanceSource):
        self._source = source

    def _records(self, student_id: str) -> Sequence[AttendanceRecord]:
        records = self._source.get_for_student(student_id)
        if records is None:
            raise NotFoundError(f"Student {student_id} not found")
        return records

    def get_attendance_view(self, student_id: str) -> AttendanceView:
        records = self._records(student_id)
        overall = aggregator.overall_percentage(records)
        groups = aggregator.group_by_subject(records)
        logger.debug("Student %s: %d record(s), %d subject(s)", student_id, len(records), len(groups))

        return AttendanceView(
            has_records=bool(records),
            overall_percentage=overall,
            overall_band=aggregator.attendance_band(overall).value,
            subjects=[self._subject_row(g) for g in groups.values()],
        )

    def get_chart_data(self, student_id: str) -> list[dict]:
        return [
            {
                "subject": s.subject_name,
                "attendancePercentage": s.percentage,
                "totalClasses": s.sessions,
                "attendedClasses": s.present,
            }
            for s in aggregator.build_subject_summaries(self._records(student_id))
        ]

    def get_overview_chart(self, student_id: str) -> list[dict]:
        records = self._records(student_id)
        return [
            {"name": "Present", "value": aggregator.overall_percentage(records)},
            {"name": "Absent", "value": aggregator.absent_percentage(records)},
        ]

    def get_subject_attendance(self, student_id: str, subject_id: str) -> dict:
        records = aggregator.filter_by_subject(self._records(student_id), subject_id)
        group = aggregator.group_by_subject(records).get(subject_id)
        if group is None:
            raise NotFoundError(f"No attendance for subject {subject_id}")
        return self._subject_row(group)

    def _subject_row(self, g: SubjectAttendanceGroup) -> dict:
        pct = aggregator.subject_percentage(g.present, g.sessions)
        return {
            "subject_id": g.subject_id,
            "subject": g.subject_name,
            "subject_code": g.subject_code,
            "present": g.present,
            "absent": g.absent,
            "sessions": g.sessions,
            "percentage": pct,
            "band": aggregator.attendance_band(pct).value,
            "details": [self._detail_row(r) for r in g.records],
        }

    def _detail_row(self, r: AttendanceRecord) -> dict:
        label = {
            AttendanceStatus.PRESENT: "Present",
            AttendanceStatus.ABSENT: "Absent",
        }.get(r.status, "Unknown")

        return {
            "date": format_detail_date(r.date),
            "status": label,
        }
