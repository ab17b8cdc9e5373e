"""Attendance aggregation.

Pure functions over a snapshot of attendance records: grouping by subject and
percentage metrics per subject and overall. Nothing here performs I/O or keeps
state between calls; every call builds fresh, immutable results.

Percentages are rounded half-up to ``PERCENT_DECIMAL_PLACES`` decimals. Any
further truncation (e.g. one decimal on a badge) is left to the presentation
layer.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from ..core.constants import GOOD_ATTENDANCE_THRESHOLD, PERCENT_DECIMAL_PLACES, WARNING_ATTENDANCE_THRESHOLD
from ..core.enums import AttendanceBand, AttendanceStatus
from .model import AttendanceRecord, SubjectAttendanceGroup, SubjectSummary

logger = logging.getLogger(__name__)

_QUANTUM = Decimal(1).scaleb(-PERCENT_DECIMAL_PLACES)
_HUNDRED = Decimal(100)


def _is_present(record: AttendanceRecord) -> bool:
    return record.status == AttendanceStatus.PRESENT


def group_by_subject(records: Iterable[AttendanceRecord]) -> dict[str, SubjectAttendanceGroup]:
    """Group records by subject id, keeping first-occurrence order.

    Every grouped record counts as one session; only ``Present`` records count
    as present. Records without a subject id cannot be placed in a group and
    are skipped.
    """
    buckets: dict[str, list[AttendanceRecord]] = {}
    skipped = 0

    for r in records:
        if not r.subject_id:
            skipped += 1
            continue
        buckets.setdefault(r.subject_id, []).append(r)

    if skipped:
        logger.debug("Skipped %d attendance record(s) without a subject id", skipped)

    groups: dict[str, SubjectAttendanceGroup] = {}
    for subject_id, items in buckets.items():
        first = items[0]
        groups[subject_id] = SubjectAttendanceGroup(
            subject_id=subject_id,
            subject_name=first.subject_name,
            subject_code=first.subject_code,
            sessions=len(items),
            present=sum(1 for r in items if _is_present(r)),
            records=tuple(items),
        )
    return groups


def subject_percentage(present: int, sessions: int) -> float:
    """``present / sessions * 100`` rounded half-up; 0 when there are no sessions."""
    if sessions <= 0:
        return 0.0

    pct = (Decimal(present) * _HUNDRED / Decimal(sessions)).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    pct = min(max(pct, Decimal(0)), _HUNDRED)
    return float(pct)


def overall_percentage(records: Sequence[AttendanceRecord]) -> float:
    """Percentage across all subjects, counted on the flat list.

    Records without a subject id are still part of this tally.
    """
    present = sum(1 for r in records if _is_present(r))
    return subject_percentage(present, len(records))


def absent_percentage(records: Sequence[AttendanceRecord]) -> float:
    """Complement of the overall percentage, so present + absent == 100."""
    if not records:
        return 0.0
    return round(100 - overall_percentage(records), PERCENT_DECIMAL_PLACES)


def build_subject_summaries(records: Iterable[AttendanceRecord]) -> list[SubjectSummary]:
    return [
        SubjectSummary(
            subject_id=g.subject_id,
            subject_name=g.subject_name,
            subject_code=g.subject_code,
            present=g.present,
            sessions=g.sessions,
            percentage=subject_percentage(g.present, g.sessions),
        )
        for g in group_by_subject(records).values()
    ]


def filter_by_subject(records: Iterable[AttendanceRecord], subject_id: str) -> list[AttendanceRecord]:
    return [r for r in records if r.subject_id and r.subject_id == subject_id]


def attendance_band(percentage: float) -> AttendanceBand:
    if percentage >= GOOD_ATTENDANCE_THRESHOLD:
        return AttendanceBand.GOOD
    if percentage >= WARNING_ATTENDANCE_THRESHOLD:
        return AttendanceBand.WARNING
    return AttendanceBand.LOW
