from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import EventKind, ShiftId
from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def save(self, event: AttendanceEvent) -> AttendanceEvent:
        raise NotImplementedError

    def update(self, event: AttendanceEvent) -> AttendanceEvent:
        """Replace every field of an existing event.

        Raises NotFoundError when no event has that id.
        """

        raise NotImplementedError

    def patch(
        self,
        event_id: str,
        *,
        employee_id: Optional[str] = None,
        instant: Optional[datetime] = None,
        kind: Optional[EventKind] = None,
    ) -> AttendanceEvent:
        raise NotImplementedError

    def delete(self, event_id: str) -> bool:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceEvent]:
        """Events of one employee from start 00:00:00 to end 23:59:59 UTC, oldest first."""

        raise NotImplementedError

    def get_employee_shift_id(self, employee_id: str) -> ShiftId:
        raise NotImplementedError
