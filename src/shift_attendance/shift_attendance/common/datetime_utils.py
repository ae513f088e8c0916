from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterator

from ..core.constants import DATE_FORMAT, INSTANT_FORMAT, SECONDS_PER_MINUTE
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from e


def parse_utc_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant into an aware UTC datetime.

    Accepts a trailing ``Z`` or an explicit offset; naive values are taken as UTC.
    """
    raw = str(value).strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid instant {value!r}, expected ISO-8601 UTC") from e
    return as_utc(parsed)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_utc_instant(value: datetime) -> str:
    return as_utc(value).strftime(INSTANT_FORMAT)


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def now_utc() -> datetime:
    """Current UTC instant truncated to whole seconds.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc).replace(microsecond=0)


def day_start(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def day_end(day: date) -> datetime:
    """Last whole second of the UTC day."""
    return datetime(day.year, day.month, day.day, 23, 59, 59, tzinfo=timezone.utc)


def enumerate_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end inclusive (nothing if start > end)."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def minutes_between(earlier: datetime, later: datetime) -> int:
    """Whole minutes from earlier to later, floored and never negative."""
    seconds = (later - earlier).total_seconds()
    return max(0, int(seconds // SECONDS_PER_MINUTE))
