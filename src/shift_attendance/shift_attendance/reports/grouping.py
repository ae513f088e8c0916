from __future__ import annotations

from datetime import date
from typing import Iterable

from ..attendance.model import AttendanceEvent


def group_by_day(events: Iterable[AttendanceEvent]) -> dict[date, list[AttendanceEvent]]:
    """Sort events by instant and bucket them by their UTC calendar day.

    The sort is stable: events sharing an identical instant keep their input
    order, which callers should not rely on. Days without events are absent.
    """

    buckets: dict[date, list[AttendanceEvent]] = {}
    for event in sorted(events, key=lambda e: e.instant):
        buckets.setdefault(event.day, []).append(event)
    return buckets
