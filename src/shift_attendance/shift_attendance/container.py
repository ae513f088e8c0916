from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .reports.assembler import ReportAssembler
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    report_service: AttendanceReportService

    conn: DatabaseConnection | None = None


def build_services(attendance_repo: AttendanceRepository, *, conn: DatabaseConnection | None = None) -> Container:
    return Container(
        attendance_repo=attendance_repo,
        attendance_service=AttendanceService(attendance_repo),
        report_service=AttendanceReportService(attendance_repo, assembler=ReportAssembler()),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(MySQLAttendanceRepository(conn), conn=conn)
