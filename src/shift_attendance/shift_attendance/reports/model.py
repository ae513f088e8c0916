from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..attendance.model import AttendanceEvent
from ..core.enums import ShiftId
from ..core.exceptions import ReconciliationError


@dataclass(frozen=True)
class WindowTally:
    """Minutes late and idle contributed by one work window."""

    minutes_late: int = 0
    minutes_idle: int = 0

    def __add__(self, other: "WindowTally") -> "WindowTally":
        return WindowTally(
            minutes_late=self.minutes_late + other.minutes_late,
            minutes_idle=self.minutes_idle + other.minutes_idle,
        )


@dataclass(frozen=True)
class ReportDay:
    day: date
    shift_id: ShiftId
    minutes_late: int
    minutes_idle: int
    events: tuple[AttendanceEvent, ...] = ()


@dataclass(frozen=True)
class Report:
    """Read-model for one employee over one inclusive date range."""

    employee_id: str
    start: date
    end: date
    total_minutes_late: int
    total_minutes_idle: int
    days: tuple[ReportDay, ...] = ()

    def __post_init__(self) -> None:
        late = sum(d.minutes_late for d in self.days)
        idle = sum(d.minutes_idle for d in self.days)
        if late != self.total_minutes_late or idle != self.total_minutes_idle:
            raise ReconciliationError(
                f"Report totals ({self.total_minutes_late}, {self.total_minutes_idle}) "
                f"do not match day sums ({late}, {idle})"
            )
