from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..auth.web import client_sessions
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        email = str(data.get("email", ""))
        password = str(data.get("password", ""))

        try:
            result = client_sessions(container).login(email, password)
        except Exception as e:
            logger.exception("Login failed unexpectedly")
            message = f"System error during login: {e}" if app.config.get("DEBUG") else "System error during login"
            return jsonify({"success": False, "error": message}), 500

        if not result.success:
            return jsonify({"success": False, "error": result.error}), 401
        return jsonify({"success": True, "user": result.user.to_dict()})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        client_sessions(container).logout()
        return jsonify({"success": True})

    @app.route("/api/session", methods=["GET"], endpoint="session_status")
    def session_status():
        sessions = client_sessions(container)
        user = sessions.current_user()
        return jsonify(
            {
                "authenticated": user is not None,
                "user": user.to_dict() if user else None,
                "expires_in": int(sessions.time_until_expiry().total_seconds()),
            }
        )

    @app.route("/api/session/extend", methods=["POST"], endpoint="extend_session")
    def extend_session():
        sessions = client_sessions(container)
        if not sessions.is_authenticated():
            return jsonify({"success": False, "message": "Please log in to continue."}), 401
        sessions.extend_session()
        return jsonify({"success": True, "expires_in": int(sessions.time_until_expiry().total_seconds())})

    @app.route("/api/users/login-enabled", methods=["GET"], endpoint="login_enabled_users")
    def login_enabled_users():
        users = container.user_directory.list_login_enabled_users()
        return jsonify(
            [{"email": u.email, "name": u.name, "has_temp_password": u.has_temp_password} for u in users]
        )
