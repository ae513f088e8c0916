from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_utc_instant, parse_utc_instant
from ..common.validators import require_date_range, require_event_kind, require_non_empty
from ..container import Container
from ..core.constants import API_PREFIX, EVENT_KIND_LABELS
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from ..reports.payload import event_to_dict

logger = logging.getLogger(__name__)


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _json_object() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object")
    return data


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route(f"{API_PREFIX}/marcaciones", methods=["POST"], endpoint="register_marking")
    def register_marking():
        """Clock in or out: the kind is picked from the employee's last event today."""
        try:
            data = _json_object()
            employee_id = require_non_empty(data.get("idEmpleado"), "idEmpleado")
            event = service.register_next(employee_id)
        except ValidationError as e:
            return _error(f"Bad Request: {e}", 400)
        except StorageError:
            logger.exception("Store failure: register_marking")
            return _error("Service Unavailable", 503)
        except Exception:
            logger.exception("Internal Server Error: register_marking")
            return _error("Internal Server Error", 500)

        return jsonify({
            "idMarcacion": event.event_id,
            "idEmpleado": event.employee_id,
            "timestamp": format_utc_instant(event.instant),
            "tipo": EVENT_KIND_LABELS[event.kind],
        }), 201

    @app.route(f"{API_PREFIX}/attendances", methods=["POST"], endpoint="create_attendance")
    def create_attendance():
        try:
            data = _json_object()
            employee_id = require_non_empty(data.get("employeeId"), "employeeId")
            kind = require_event_kind(data.get("type"))
            event = service.register(employee_id, kind)
        except ValidationError as e:
            return _error(f"Bad Request: {e}", 400)
        except StorageError:
            logger.exception("Store failure: create_attendance")
            return _error("Service Unavailable", 503)
        except Exception:
            logger.exception("Internal Server Error: create_attendance")
            return _error("Internal Server Error", 500)

        return jsonify(event_to_dict(event)), 201

    @app.route(f"{API_PREFIX}/attendances", methods=["GET"], endpoint="search_attendances")
    def search_attendances():
        args = request.args
        try:
            employee_id = require_non_empty(args.get("employeeId"), "employeeId")
            start, end = require_date_range(args.get("startDate"), args.get("endDate"))
            events = service.search(employee_id, start, end)
        except ValidationError as e:
            return _error(f"Bad Request: {e}", 400)
        except StorageError:
            logger.exception("Store failure: search_attendances")
            return _error("Service Unavailable", 503)
        except Exception:
            logger.exception("Internal Server Error: search_attendances")
            return _error("Internal Server Error", 500)

        return jsonify([event_to_dict(e) for e in events]), 200

    @app.route(f"{API_PREFIX}/attendances/<event_id>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(event_id: str):
        try:
            event = service.get(event_id)
        except NotFoundError as e:
            return _error(str(e), 404)
        except StorageError:
            logger.exception("Store failure: get_attendance")
            return _error("Service Unavailable", 503)
        except Exception:
            logger.exception("Internal Server Error: get_attendance")
            return _error("Internal Server Error", 500)

        return jsonify(event_to_dict(event)), 200

    @app.route(f"{API_PREFIX}/attendances/<event_id>", methods=["PATCH"], endpoint="patch_attendance")
    def patch_attendance(event_id: str):
        try:
            data = _json_object()
            kind = require_event_kind(data["type"]) if "type" in data else None
            instant = parse_utc_instant(data["timestamp"]) if "timestamp" in data else None
            event = service.patch(
                event_id,
                employee_id=data.get("employeeId"),
                instant=instant,
                kind=kind,
            )
        except ValidationError as e:
            return _error(f"Bad Request: {e}", 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except StorageError:
            logger.exception("Store failure: patch_attendance")
            return _error("Service Unavailable", 503)
        except Exception:
            logger.exception("Internal Server Error: patch_attendance")
            return _error("Internal Server Error", 500)

        return jsonify(event_to_dict(event)), 200

    @app.route(f"{API_PREFIX}/attendances/<event_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(event_id: str):
        try:
            service.delete(event_id)
        except NotFoundError as e:
            return _error(str(e), 404)
        except StorageError:
            logger.exception("Store failure: delete_attendance")
            return _error("Service Unavailable", 503)
        except Exception:
            logger.exception("Internal Server Error: delete_attendance")
            return _error("Internal Server Error", 500)

        return "", 204
