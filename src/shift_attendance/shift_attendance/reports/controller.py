from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_date_range, require_non_empty
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.exceptions import StorageError, ValidationError
from .payload import report_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/reportes/horario", methods=["GET"], endpoint="schedule_report")
    def schedule_report():
        args = request.args
        try:
            employee_id = require_non_empty(args.get("empleadoId"), "empleadoId")
            start, end = require_date_range(
                args.get("fechaInicio"),
                args.get("fechaFin"),
                start_field="fechaInicio",
                end_field="fechaFin",
            )
            report = container.report_service.build_attendance_report(employee_id=employee_id, start=start, end=end)
        except ValidationError as e:
            return jsonify({"error": f"Bad Request: {e}"}), 400
        except StorageError:
            logger.exception("Store failure: schedule_report")
            return jsonify({"error": "Service Unavailable"}), 503
        except Exception:
            logger.exception("Internal Server Error: schedule_report")
            return jsonify({"error": "Internal Server Error"}), 500

        return jsonify(report_to_dict(report)), 200
