from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ...attendance.model import AttendanceEvent
from ...common.datetime_utils import minutes_between
from ...core.enums import EventKind
from ...shifts.model import WorkWindow
from ..model import WindowTally
from .base import WindowCalculator


class StandardWindowCalculator(WindowCalculator):
    """Standard rule for one window of one day.

    Lateness only looks at the first entrance inside the window. Idle time
    adds up every exit followed by an entrance inside the window; a later exit
    replaces a pending one, and a trailing exit counts for nothing.
    """

    def tally(self, window: WorkWindow, events: Sequence[AttendanceEvent]) -> WindowTally:
        in_window = [e for e in events if window.contains(e.instant)]
        return WindowTally(
            minutes_late=self.minutes_late(window, in_window),
            minutes_idle=self.minutes_idle(window, in_window),
        )

    def minutes_late(self, window: WorkWindow, in_window: Sequence[AttendanceEvent]) -> int:
        first_entrance = next((e for e in in_window if e.kind == EventKind.ENTRANCE), None)
        if first_entrance is None or first_entrance.instant <= window.start:
            return 0
        return minutes_between(window.start, first_entrance.instant)

    def minutes_idle(self, window: WorkWindow, in_window: Sequence[AttendanceEvent]) -> int:
        idle = 0
        pending_exit: Optional[datetime] = None
        for event in in_window:
            if event.kind == EventKind.EXIT:
                pending_exit = event.instant
            elif pending_exit is not None:
                if pending_exit >= window.start and event.instant <= window.end:
                    idle += minutes_between(pending_exit, event.instant)
                pending_exit = None
        return idle
