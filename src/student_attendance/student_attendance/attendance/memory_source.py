from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError
from .ingest import records_from_payloads
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class InMemoryAttendanceSource:
    """Holds fetched attendance lists per student.

    Each student maps to an immutable snapshot; ``put`` replaces it wholesale.
    """

    def __init__(self):
        self._by_student: dict[str, tuple[AttendanceRecord, ...]] = {}

    def put(self, student_id: str, records: Iterable[AttendanceRecord]) -> None:
        self._by_student[str(student_id)] = tuple(records)

    def get_for_student(self, student_id: str) -> Optional[Sequence[AttendanceRecord]]:
        return self._by_student.get(str(student_id))

    def student_ids(self) -> list[str]:
        return list(self._by_student)

    @classmethod
    def from_json_file(cls, path: Path) -> "InMemoryAttendanceSource":
        """Load ``{"students": [{"_id": ..., "attendance": [...]}, ...]}``."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError(f"{path}: invalid JSON ({e})") from e

        students = data.get("students") if isinstance(data, dict) else None
        if not isinstance(students, list):
            raise ValidationError(f"{path}: expected a 'students' list")

        source = cls()
        for s in students:
            if not isinstance(s, dict) or not s.get("_id"):
                raise ValidationError(f"{path}: every student needs an '_id'")
            source.put(s["_id"], records_from_payloads(s.get("attendance") or []))

        logger.info("Loaded attendance for %d student(s) from %s", len(students), path)
        return source
