from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import EventKind
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_event_kind(value: Optional[str], field_name: str = "type") -> EventKind:
    raw = require_non_empty(value, field_name).upper()
    try:
        return EventKind(raw)
    except ValueError as e:
        allowed = ", ".join(k.value for k in EventKind)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from e


def require_date_range(
    start: Optional[str],
    end: Optional[str],
    *,
    start_field: str = "startDate",
    end_field: str = "endDate",
) -> tuple[date, date]:
    """Parse an inclusive range; start after end is allowed and yields no days."""
    start_date = parse_iso_date(require_non_empty(start, start_field))
    end_date = parse_iso_date(require_non_empty(end, end_field))
    return start_date, end_date
