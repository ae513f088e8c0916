from __future__ import annotations

from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    """Kind of a clock event recorded at the terminal."""

    ENTRANCE = "ENTRANCE"
    EXIT = "EXIT"


class ShiftId(str, Enum):
    """Organization-wide shift labels assigned to employees."""

    A = "A"
    B = "B"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ShiftId":
        """Map a stored/requested shift code to a ShiftId.

        Codes match exactly. Anything other than a known label (including
        "a" or " B ") becomes UNKNOWN so that reporting stays total over its input.
        """

        if value is None:
            return cls.UNKNOWN
        try:
            return cls(value)
        except (TypeError, ValueError):
            return cls.UNKNOWN
