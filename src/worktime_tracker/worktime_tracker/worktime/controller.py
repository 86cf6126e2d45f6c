from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, g, jsonify, request

from ..auth.web import login_required
from ..common.validators import require_non_negative_int
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.work_time_service

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _server_error(action: str, e: Exception):
        logger.exception("System error while %s", action)
        if bool(app.config.get("DEBUG", False)):
            return _error(f"System error while {action}: {e}", 500)
        return _error(f"System error while {action}", 500)

    @app.route("/api/work-times", methods=["POST"], endpoint="save_work_time")
    @login_required(container)
    def save_work_time():
        data = request.get_json(silent=True) or {}
        try:
            record = service.record_work_time(
                g.current_user.id,
                work_date=data.get("date", ""),
                start_time=data.get("start_time", ""),
                end_time=data.get("end_time", ""),
                break_minutes=data.get("break_minutes", 0),
                notes=data.get("notes"),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception as e:
            return _server_error("saving work time", e)
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/work-times", methods=["GET"], endpoint="list_work_times")
    @login_required(container)
    def list_work_times():
        try:
            limit = require_non_negative_int(request.args.get("limit", 0), "limit")
        except ValidationError as e:
            return _error(str(e), 400)
        records = service.get_history(g.current_user.id, limit=limit or None)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/work-times/summary", methods=["GET"], endpoint="work_summary")
    @login_required(container)
    def work_summary():
        return jsonify(asdict(service.get_summary(g.current_user.id)))

    @app.route("/api/work-times/weekly", methods=["GET"], endpoint="weekly_work_data")
    @login_required(container)
    def weekly_work_data():
        series = service.get_weekly_data(g.current_user.id)
        return jsonify(
            [{"date": d.date.isoformat(), "hours": d.hours, "day_name": d.day_name} for d in series]
        )

    @app.route("/api/work-times/total", methods=["GET"], endpoint="work_hours_total")
    @login_required(container)
    def work_hours_total():
        try:
            hours = service.get_hours_between(
                g.current_user.id,
                request.args.get("start", ""),
                request.args.get("end", ""),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify({"total_hours": hours})

    @app.route("/api/work-times/<work_date>", methods=["GET"], endpoint="work_time_for_date")
    @login_required(container)
    def work_time_for_date(work_date: str):
        try:
            record = service.get_record_for_date(g.current_user.id, work_date)
        except ValidationError as e:
            return _error(str(e), 400)
        if not record:
            return _error("No work record for this date", 404)
        return jsonify(record.to_dict())

    @app.route("/api/work-times/<record_id>", methods=["DELETE"], endpoint="delete_work_time")
    @login_required(container)
    def delete_work_time(record_id: str):
        try:
            deleted = service.delete_work_time(g.current_user.id, record_id)
        except Exception as e:
            return _server_error("deleting work time", e)
        if not deleted:
            return _error("Work record not found", 404)
        return jsonify({"success": True})
