from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Normalized attendance status of one session."""

    PRESENT = "Present"
    ABSENT = "Absent"
    UNKNOWN = "UNKNOWN"


class AttendanceBand(str, Enum):
    """Colour band used by tables/badges to flag an attendance percentage."""

    GOOD = "good"
    WARNING = "warning"
    LOW = "low"
