from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import as_utc, now_utc
from ..common.validators import require_non_empty
from ..core.enums import EventKind, ShiftId
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _new_event_id() -> str:
    return str(uuid.uuid4())


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._new_id = id_factory or _new_event_id
        self._clock = clock or now_utc

    def register(self, employee_id: str, kind: EventKind, *, now: Optional[datetime] = None) -> AttendanceEvent:
        employee_id = require_non_empty(employee_id, "employeeId")
        event = AttendanceEvent(
            event_id=self._new_id(),
            employee_id=employee_id,
            instant=as_utc(now) if now else self._clock(),
            kind=kind,
        )
        saved = self._attendance.save(event)
        logger.info("Registered %s for employee=%s at %s", saved.kind.value, employee_id, saved.instant.isoformat())
        return saved

    def register_next(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceEvent:
        """Register the event that follows the employee's last event today.

        No event yet, or an EXIT last, means ENTRANCE; an ENTRANCE last means EXIT.
        """

        employee_id = require_non_empty(employee_id, "employeeId")
        now = as_utc(now) if now else self._clock()
        today = now.date()

        todays = self._attendance.list_for_employee(employee_id, start_date=today, end_date=today)
        last = todays[-1] if todays else None
        kind = EventKind.EXIT if last and last.kind == EventKind.ENTRANCE else EventKind.ENTRANCE
        return self.register(employee_id, kind, now=now)

    def search(self, employee_id: str, start_date: date, end_date: date) -> Sequence[AttendanceEvent]:
        employee_id = require_non_empty(employee_id, "employeeId")
        return self._attendance.list_for_employee(employee_id, start_date=start_date, end_date=end_date)

    def get(self, event_id: str) -> AttendanceEvent:
        event = self._attendance.get_by_id(require_non_empty(event_id, "id"))
        if event is None:
            raise NotFoundError(f"Attendance {event_id} not found")
        return event

    def list_all(self) -> Sequence[AttendanceEvent]:
        return self._attendance.list_all()

    def update(self, event: AttendanceEvent) -> AttendanceEvent:
        require_non_empty(event.employee_id, "employeeId")
        return self._attendance.update(event)

    def patch(
        self,
        event_id: str,
        *,
        employee_id: Optional[str] = None,
        instant: Optional[datetime] = None,
        kind: Optional[EventKind] = None,
    ) -> AttendanceEvent:
        if employee_id is None and instant is None and kind is None:
            raise ValidationError("Nothing to update")
        if employee_id is not None:
            employee_id = require_non_empty(employee_id, "employeeId")
        return self._attendance.patch(
            require_non_empty(event_id, "id"),
            employee_id=employee_id,
            instant=as_utc(instant) if instant else None,
            kind=kind,
        )

    def delete(self, event_id: str) -> None:
        if not self._attendance.delete(require_non_empty(event_id, "id")):
            raise NotFoundError(f"Attendance {event_id} not found")
        logger.info("Deleted attendance %s", event_id)

    def get_employee_shift_id(self, employee_id: str) -> ShiftId:
        return self._attendance.get_employee_shift_id(require_non_empty(employee_id, "employeeId"))
