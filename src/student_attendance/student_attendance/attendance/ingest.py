from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

_STATUS_BY_TEXT = {
    "present": AttendanceStatus.PRESENT,
    "absent": AttendanceStatus.ABSENT,
}


def normalize_status(value: Any) -> AttendanceStatus:
    """Map a raw status to Present/Absent; anything else becomes UNKNOWN."""
    if isinstance(value, AttendanceStatus):
        return value
    if not isinstance(value, str):
        return AttendanceStatus.UNKNOWN
    return _STATUS_BY_TEXT.get(value.strip().lower(), AttendanceStatus.UNKNOWN)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def record_from_payload(payload: Mapping) -> AttendanceRecord:
    """Build a record from a backend attendance entry.

    Supports the populated shape ``{"subName": {"_id", "subName", "subCode"}, "date", "status"}``
    as well as a flat ``subjectId``/``subjectName``/``subjectCode`` shape.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(f"Attendance entry must be an object, got {type(payload).__name__}")

    subject = payload.get("subName")
    if isinstance(subject, Mapping):
        subject_id = _text(subject.get("_id"))
        subject_name = _text(subject.get("subName"))
        subject_code = _text(subject.get("subCode"))
    else:
        # unpopulated reference: subName holds the bare id
        reference = subject if isinstance(subject, (str, int)) and not isinstance(subject, bool) else None
        subject_id = _text(payload.get("subjectId")) or _text(reference)
        subject_name = _text(payload.get("subjectName"))
        subject_code = _text(payload.get("subjectCode"))

    return AttendanceRecord(
        subject_id=subject_id,
        subject_name=subject_name or subject_id or "",
        subject_code=subject_code,
        date=parse_iso_date(payload.get("date")),
        status=normalize_status(payload.get("status")),
    )


def records_from_payloads(payloads: Iterable[Mapping]) -> list[AttendanceRecord]:
    return [record_from_payload(p) for p in payloads]
