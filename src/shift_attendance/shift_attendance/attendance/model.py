from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import as_utc
from ..core.enums import EventKind


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one clock-in or clock-out at the terminal.

    ``instant`` is normalized to a timezone-aware UTC datetime; naive values
    are taken as UTC and offset values are converted.
    """

    event_id: str
    employee_id: str
    instant: datetime
    kind: EventKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "instant", as_utc(self.instant))

    @property
    def day(self) -> date:
        return self.instant.date()
