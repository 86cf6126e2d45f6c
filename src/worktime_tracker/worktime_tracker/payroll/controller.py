from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..auth.web import login_required
from ..common.validators import require_iso_date
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/weekly", methods=["GET"], endpoint="weekly_pay")
    @login_required(container)
    def weekly_pay():
        wage_arg = request.args.get("hourly_wage")
        try:
            week_of = require_iso_date(request.args.get("week_of") or container.clock().date(), "week_of")
            hourly_wage = float(wage_arg) if wage_arg else None
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except ValueError:
            return jsonify({"success": False, "message": "hourly_wage must be a number"}), 400

        try:
            report = container.payroll_service.weekly_pay(g.current_user.id, week_of, hourly_wage=hourly_wage)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(report.to_dict())
