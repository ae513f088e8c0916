"""Fixed shift schedules.

Schedules are organization-wide constants: resolving them only needs the
shift label and the calendar day the windows are anchored to.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional, Union

from ..core.enums import ShiftId
from .model import WorkWindow

SHIFT_SCHEDULES: dict[ShiftId, tuple[tuple[time, time], ...]] = {
    ShiftId.A: (
        (time(6, 0), time(10, 0)),
        (time(11, 0), time(15, 0)),
    ),
    ShiftId.B: (
        (time(15, 0), time(19, 0)),
        # Closes on the last second of the day, not at next midnight.
        (time(20, 0), time(23, 59, 59)),
    ),
    ShiftId.UNKNOWN: (),
}


def _coerce(shift_id: Union[ShiftId, str, None]) -> ShiftId:
    if isinstance(shift_id, ShiftId):
        return shift_id
    return ShiftId.parse(shift_id)


def resolve_windows(shift_id: Union[ShiftId, str, None], day: date) -> list[WorkWindow]:
    """Return the ordered work windows of ``shift_id`` on ``day``.

    Unrecognised shift values resolve to no windows instead of raising.
    """

    blocks = SHIFT_SCHEDULES.get(_coerce(shift_id), ())
    return [
        WorkWindow(
            start=datetime.combine(day, start, tzinfo=timezone.utc),
            end=datetime.combine(day, end, tzinfo=timezone.utc),
        )
        for start, end in blocks
    ]


def _clock(value: time) -> str:
    return value.strftime("%H:%M:%S" if value.second else "%H:%M")


def describe_schedule(shift_id: Optional[ShiftId]) -> list[str]:
    blocks = SHIFT_SCHEDULES.get(_coerce(shift_id), ())
    return [f"{_clock(start)}-{_clock(end)}" for start, end in blocks]
