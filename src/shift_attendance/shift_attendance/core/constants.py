"""Constants and display labels.

Note: Keep constants here to avoid magic strings spread across code.
"""

from .enums import EventKind, ShiftId

API_PREFIX = "/api/v1.0"

SECONDS_PER_MINUTE = 60

# Canonical fixed-width UTC instant used on the wire and in reports.
INSTANT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DATE_FORMAT = "%Y-%m-%d"
# MySQL DATETIME columns hold naive UTC.
DB_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

SHIFT_LABELS = {
    ShiftId.A: "Turno A",
    ShiftId.B: "Turno B",
    ShiftId.UNKNOWN: "Desconocido",
}

EVENT_KIND_LABELS = {
    EventKind.ENTRANCE: "ENTRADA",
    EventKind.EXIT: "SALIDA",
}
