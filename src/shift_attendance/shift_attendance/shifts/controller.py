from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.constants import API_PREFIX, SHIFT_LABELS
from ..core.enums import ShiftId
from .schedule import describe_schedule


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/shifts", methods=["GET"], endpoint="list_shifts")
    def list_shifts():
        return jsonify([
            {
                "id": shift.value,
                "name": SHIFT_LABELS[shift],
                "windows": describe_schedule(shift),
            }
            for shift in ShiftId
        ]), 200
