from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Union

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import enumerate_days
from ..core.enums import ShiftId
from ..shifts.schedule import resolve_windows
from .calculator.base import WindowCalculator
from .calculator.standard_calculator import StandardWindowCalculator
from .grouping import group_by_day
from .model import Report, ReportDay, WindowTally

logger = logging.getLogger(__name__)


class ReportAssembler:
    """Build a lateness/idle report for one employee.

    The assembler is pure: it does no I/O, keeps no per-call state and never
    filters events by range, only by day.
    """

    def __init__(self, *, calculator: Optional[WindowCalculator] = None):
        self._calculator = calculator or StandardWindowCalculator()

    def build(
        self,
        *,
        employee_id: str,
        start: date,
        end: date,
        shift_id: Union[ShiftId, str, None],
        events: Iterable[AttendanceEvent],
    ) -> Report:
        shift = shift_id if isinstance(shift_id, ShiftId) else ShiftId.parse(shift_id)
        by_day = group_by_day(events)

        days: list[ReportDay] = []
        total = WindowTally()

        for day in enumerate_days(start, end):
            day_events = by_day.get(day, [])
            day_total = WindowTally()
            for window in resolve_windows(shift, day):
                day_total = day_total + self._calculator.tally(window, day_events)

            logger.debug(
                "employee=%s day=%s shift=%s late=%s idle=%s events=%s",
                employee_id, day, shift.value, day_total.minutes_late, day_total.minutes_idle, len(day_events),
            )
            days.append(
                ReportDay(
                    day=day,
                    shift_id=shift,
                    minutes_late=day_total.minutes_late,
                    minutes_idle=day_total.minutes_idle,
                    events=tuple(day_events),
                )
            )
            total = total + day_total

        return Report(
            employee_id=employee_id,
            start=start,
            end=end,
            total_minutes_late=total.minutes_late,
            total_minutes_idle=total.minutes_idle,
            days=tuple(days),
        )
