from __future__ import annotations

import uuid
from functools import wraps

from flask import g, jsonify, session

from ..container import Container
from .session import SessionManager


def client_sessions(container: Container) -> SessionManager:
    """Session manager for the calling browser (one slot per cookie client id)."""
    client_id = session.get("client_id")
    if not client_id:
        client_id = uuid.uuid4().hex
        session["client_id"] = client_id
    return container.sessions_for(client_id)


def login_required(container: Container):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = client_sessions(container).current_user()
            if not user:
                return jsonify({"success": False, "message": "Please log in to continue."}), 401
            g.current_user = user
            return view(*args, **kwargs)

        return wrapper

    return decorator
