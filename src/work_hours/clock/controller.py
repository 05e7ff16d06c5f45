from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.clock_service

    def _fail(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _json_object():
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _parse_datetime_field(data: dict, field: str):
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Missing {field}")
        try:
            return parse_iso_datetime(value)
        except ValueError:
            raise ValidationError(f"Invalid {field}: {value!r}") from None

    @app.route("/api/weeks", methods=["GET"], endpoint="weeks")
    def weeks():
        try:
            return jsonify({"weeks": service.history_ui()}), 200
        except Exception:
            logger.exception("Error fetching work logs")
            return _fail("Error fetching work logs", 500)

    @app.route("/api/status", methods=["GET"], endpoint="status")
    def status():
        try:
            return jsonify({"next_action": service.next_action().value}), 200
        except Exception:
            logger.exception("Error fetching work logs")
            return _fail("Error fetching work logs", 500)

    @app.route("/api/clock", methods=["POST"], endpoint="clock")
    def clock():
        try:
            data = _json_object()
            event = service.clock_in_out(data.get("location"))
            return jsonify({"success": True, "event": event.to_dict()}), 201
        except ValidationError as e:
            return _fail(str(e), 400)
        except Exception:
            logger.exception("Error clocking in/out")
            return _fail("Error clocking in/out", 500)

    @app.route("/api/logs/custom", methods=["POST"], endpoint="add_custom_log")
    def add_custom_log():
        try:
            data = _json_object()
            clock_in = _parse_datetime_field(data, "clock_in")
            clock_out = _parse_datetime_field(data, "clock_out")
            pair = service.add_custom_pair(data.get("location"), clock_in, clock_out)
            return jsonify({"success": True, "events": [e.to_dict() for e in pair]}), 201
        except ValidationError as e:
            return _fail(str(e), 400)
        except Exception:
            logger.exception("Error adding custom log")
            return _fail("Error adding custom log", 500)

    @app.route("/api/logs/<event_id>", methods=["DELETE"], endpoint="delete_log")
    def delete_log(event_id: str):
        try:
            service.delete_event(event_id)
            return "", 204
        except NotFoundError as e:
            return _fail(str(e), 404)
        except Exception:
            logger.exception("Error deleting log")
            return _fail("Error deleting log", 500)

    @app.route("/api/weeks/<week_start>", methods=["DELETE"], endpoint="delete_week")
    def delete_week(week_start: str):
        try:
            start = parse_iso_date(week_start)
        except ValueError:
            return _fail(f"Invalid week start: {week_start!r}", 400)
        try:
            removed = service.delete_week(start)
            return jsonify({"success": True, "deleted": removed}), 200
        except Exception:
            logger.exception("Error deleting week logs")
            return _fail("Error deleting week logs", 500)

    @app.route("/api/report.csv", methods=["GET"], endpoint="report_csv")
    def report_csv():
        try:
            data = container.report_service.build_report()
            csv_bytes = container.report_service.to_csv(data)
        except Exception:
            logger.exception("Error building weekly report")
            return _fail("Error building weekly report", 500)
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=work_hours_report.csv"},
        )
