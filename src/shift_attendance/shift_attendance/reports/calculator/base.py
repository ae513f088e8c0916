from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceEvent
from ...shifts.model import WorkWindow
from ..model import WindowTally


class WindowCalculator(ABC):
    """Calculator interface (Strategy Pattern for per-window accounting)."""

    @abstractmethod
    def tally(self, window: WorkWindow, events: Sequence[AttendanceEvent]) -> WindowTally:
        raise NotImplementedError
