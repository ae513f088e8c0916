from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WorkWindow:
    """A UTC interval of one calendar day during which presence is expected."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"WorkWindow start must precede end: {self.start} >= {self.end}")

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end
