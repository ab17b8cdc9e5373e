from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import INVALID_DATE_LABEL


def parse_iso_date(value) -> Optional[date]:
    """Parse an ISO date/datetime value into a date.

    Accepts ``date``/``datetime`` objects and strings such as ``2024-03-01`` or
    ``2024-03-01T00:00:00.000Z``. Returns None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def format_detail_date(value: Optional[date]) -> str:
    """YYYY-MM-DD for detail rows, or the invalid-date label."""
    if value is None:
        return INVALID_DATE_LABEL
    return value.strftime("%Y-%m-%d")
