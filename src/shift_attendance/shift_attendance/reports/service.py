from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty
from .assembler import ReportAssembler
from .model import Report

logger = logging.getLogger(__name__)


class AttendanceReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        assembler: Optional[ReportAssembler] = None,
    ):
        self._attendance = attendance
        self._assembler = assembler or ReportAssembler()

    def build_attendance_report(self, *, employee_id: str, start: date, end: date) -> Report:
        employee_id = require_non_empty(employee_id, "empleadoId")

        events = self._attendance.list_for_employee(employee_id, start_date=start, end_date=end)
        shift_id = self._attendance.get_employee_shift_id(employee_id)

        report = self._assembler.build(
            employee_id=employee_id,
            start=start,
            end=end,
            shift_id=shift_id,
            events=events,
        )
        logger.info(
            "Report employee=%s range=%s..%s shift=%s days=%d late=%d idle=%d",
            employee_id, start, end, shift_id.value, len(report.days),
            report.total_minutes_late, report.total_minutes_idle,
        )
        return report
