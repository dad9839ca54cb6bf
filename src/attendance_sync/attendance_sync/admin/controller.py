from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..container import Container
from ..core.exceptions import AuthenticationError

SESSION_FLAG = "is_admin"


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get(SESSION_FLAG):
            return jsonify({"success": False, "message": "Admin login required"}), 401
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or {}
        try:
            container.admin_auth_service.authenticate(data.get("password", ""))
        except AuthenticationError as e:
            return jsonify({"success": False, "message": str(e)}), 401
        session[SESSION_FLAG] = True
        return jsonify({"success": True})

    @app.route("/api/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop(SESSION_FLAG, None)
        return jsonify({"success": True})
