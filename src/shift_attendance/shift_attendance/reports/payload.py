"""JSON rendering of reports and events for API consumers."""

from __future__ import annotations

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import format_date, format_utc_instant
from ..core.constants import EVENT_KIND_LABELS, SHIFT_LABELS
from .model import Report


def event_to_dict(event: AttendanceEvent) -> dict:
    return {
        "id": event.event_id,
        "employeeId": event.employee_id,
        "timestamp": format_utc_instant(event.instant),
        "type": event.kind.value,
    }


def marking_to_dict(event: AttendanceEvent) -> dict:
    """Clock event in the localized shape used by report consumers."""
    return {
        "timestamp": format_utc_instant(event.instant),
        "tipo": EVENT_KIND_LABELS[event.kind],
    }


def report_to_dict(report: Report) -> dict:
    return {
        "empleadoId": report.employee_id,
        "rangoConsulta": {
            "inicio": format_date(report.start),
            "fin": format_date(report.end),
        },
        "resumen": {
            "totalMinutosTardanza": report.total_minutes_late,
            "totalMinutosInactividad": report.total_minutes_idle,
        },
        "detallePorDia": [
            {
                "fecha": format_date(d.day),
                "turnoAsignado": SHIFT_LABELS[d.shift_id],
                "minutosTardanzaDia": d.minutes_late,
                "minutosInactividadDia": d.minutes_idle,
                "marcaciones": [marking_to_dict(e) for e in d.events],
            }
            for d in report.days
        ],
    }
