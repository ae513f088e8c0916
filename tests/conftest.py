from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

import pytest

from shift_attendance.attendance.model import AttendanceEvent
from shift_attendance.core.enums import EventKind, ShiftId
from shift_attendance.core.exceptions import NotFoundError


def utc(y: int, mo: int, d: int, h: int = 0, mi: int = 0, s: int = 0) -> datetime:
    return datetime(y, mo, d, h, mi, s, tzinfo=timezone.utc)


class InMemoryAttendance:
    def __init__(self, events=None, shifts: Optional[dict[str, str]] = None):
        self._by_id: dict[str, AttendanceEvent] = {}
        self._shifts = dict(shifts or {})
        for e in events or []:
            self._by_id[e.event_id] = e

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: e.instant)

    def get_by_id(self, event_id: str) -> Optional[AttendanceEvent]:
        return self._by_id.get(event_id)

    def save(self, event: AttendanceEvent) -> AttendanceEvent:
        self._by_id[event.event_id] = event
        return event

    def update(self, event: AttendanceEvent) -> AttendanceEvent:
        if event.event_id not in self._by_id:
            raise NotFoundError(f"Attendance {event.event_id} not found")
        self._by_id[event.event_id] = event
        return event

    def patch(self, event_id: str, *, employee_id=None, instant=None, kind=None) -> AttendanceEvent:
        current = self._by_id.get(event_id)
        if current is None:
            raise NotFoundError(f"Attendance {event_id} not found")
        updated = AttendanceEvent(
            event_id=current.event_id,
            employee_id=employee_id if employee_id is not None else current.employee_id,
            instant=instant if instant is not None else current.instant,
            kind=kind if kind is not None else current.kind,
        )
        self._by_id[event_id] = updated
        return updated

    def delete(self, event_id: str) -> bool:
        return self._by_id.pop(event_id, None) is not None

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date):
        return [
            e
            for e in self.list_all()
            if e.employee_id == employee_id and start_date <= e.instant.date() <= end_date
        ]

    def get_employee_shift_id(self, employee_id: str) -> ShiftId:
        return ShiftId.parse(self._shifts.get(employee_id))


@pytest.fixture
def make_event():
    counter = {"n": 0}

    def _make(kind: EventKind, instant: datetime, employee_id: str = "emp-1") -> AttendanceEvent:
        counter["n"] += 1
        return AttendanceEvent(
            event_id=f"evt-{counter['n']}",
            employee_id=employee_id,
            instant=instant,
            kind=kind,
        )

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    return utc(2025, 9, 1, 6, 2, 30)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance(shifts={"emp-1": "A", "emp-2": "B"})
