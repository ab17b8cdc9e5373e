from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.memory_source import InMemoryAttendanceSource
from .attendance.service import StudentAttendanceService


@dataclass(frozen=True)
class Container:
    attendance_source: InMemoryAttendanceSource
    attendance_service: StudentAttendanceService


def build_container(*, seed_file: Optional[str] = None) -> Container:
    if seed_file:
        attendance_source = InMemoryAttendanceSource.from_json_file(Path(seed_file))
    else:
        attendance_source = InMemoryAttendanceSource()

    attendance_service = StudentAttendanceService(attendance_source)

    return Container(
        attendance_source=attendance_source,
        attendance_service=attendance_service,
    )
