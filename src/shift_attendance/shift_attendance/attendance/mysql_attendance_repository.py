from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import as_utc, day_end, day_start
from ..core.constants import DB_DATETIME_FORMAT
from ..core.enums import EventKind, ShiftId
from ..core.exceptions import NotFoundError, StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

# Kind codes stored in attendances.type
_DB_KIND = {
    EventKind.ENTRANCE: "ENTRADA",
    EventKind.EXIT: "SALIDA",
}
_DOMAIN_KIND = {v: k for k, v in _DB_KIND.items()}

_COLUMNS = "id, employee_id, ts_utc, type"


def _to_db_datetime(value: datetime) -> str:
    return as_utc(value).strftime(DB_DATETIME_FORMAT)


def _from_db_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return as_utc(value)
    return as_utc(datetime.strptime(str(value), DB_DATETIME_FORMAT))


def _row_to_event(r: Dict[str, Any]) -> AttendanceEvent:
    kind = _DOMAIN_KIND.get(str(r["type"]))
    if kind is None:
        logger.error("Attendance %s has unknown type %r", r.get("id"), r.get("type"))
        raise StorageError(f"Attendance {r.get('id')} has unknown type {r.get('type')!r}")
    return AttendanceEvent(
        event_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        instant=_from_db_datetime(r["ts_utc"]),
        kind=kind,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendances
                ORDER BY ts_utc ASC
                """
            )
            return [_row_to_event(r) for r in fetchall(cur)]

    def get_by_id(self, event_id: str) -> Optional[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendances
                WHERE id=%s
                LIMIT 1
                """,
                (event_id,),
            )
            r = fetchone(cur)
            return _row_to_event(r) if r else None

    def save(self, event: AttendanceEvent) -> AttendanceEvent:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendances(id, employee_id, ts_utc, type)
                VALUES(%s,%s,%s,%s)
                """,
                (event.event_id, event.employee_id, _to_db_datetime(event.instant), _DB_KIND[event.kind]),
            )
        return event

    def update(self, event: AttendanceEvent) -> AttendanceEvent:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendances
                SET employee_id=%s, ts_utc=%s, type=%s
                WHERE id=%s
                """,
                (event.employee_id, _to_db_datetime(event.instant), _DB_KIND[event.kind], event.event_id),
            )
        # rowcount is 0 for an unchanged row too, so check existence explicitly.
        if self.get_by_id(event.event_id) is None:
            raise NotFoundError(f"Attendance {event.event_id} not found")
        return event

    def patch(
        self,
        event_id: str,
        *,
        employee_id: Optional[str] = None,
        instant: Optional[datetime] = None,
        kind: Optional[EventKind] = None,
    ) -> AttendanceEvent:
        sets: list[str] = []
        params: list[object] = []

        if employee_id is not None:
            sets.append("employee_id=%s")
            params.append(employee_id)
        if instant is not None:
            sets.append("ts_utc=%s")
            params.append(_to_db_datetime(instant))
        if kind is not None:
            sets.append("type=%s")
            params.append(_DB_KIND[kind])

        if sets:
            params.append(event_id)
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"UPDATE attendances SET {', '.join(sets)} WHERE id=%s", tuple(params))

        event = self.get_by_id(event_id)
        if event is None:
            raise NotFoundError(f"Attendance {event_id} not found")
        return event

    def delete(self, event_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendances WHERE id=%s", (event_id,))
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendances
                WHERE employee_id=%s
                  AND ts_utc BETWEEN %s AND %s
                ORDER BY ts_utc ASC
                """,
                (employee_id, _to_db_datetime(day_start(start_date)), _to_db_datetime(day_end(end_date))),
            )
            return [_row_to_event(r) for r in fetchall(cur)]

    def get_employee_shift_id(self, employee_id: str) -> ShiftId:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT shift_id FROM employees WHERE id=%s LIMIT 1", (employee_id,))
            r = fetchone(cur)
            return ShiftId.parse(r.get("shift_id")) if r else ShiftId.UNKNOWN
