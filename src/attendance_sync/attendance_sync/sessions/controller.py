from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.exceptions import ReliabilityError, StoreError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sessions", methods=["POST"], endpoint="session_start")
    def session_start():
        data = request.get_json(silent=True) or {}
        try:
            session = container.session_service.start(data.get("name"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (ReliabilityError, StoreError, OSError) as e:
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify({"success": True, "session": session.to_dict()}), 201

    @app.route("/api/sessions/active", methods=["DELETE"], endpoint="session_end")
    def session_end():
        try:
            db = container.session_service.end()
        except (ReliabilityError, StoreError, OSError) as e:
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify(db.to_dict())

    @app.route("/api/sessions/active/qr", methods=["GET"], endpoint="session_qr")
    def session_qr():
        """PNG of the student join link for the active session."""
        try:
            session = container.session_service.active()
        except ReliabilityError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        if session is None:
            return jsonify({"success": False, "message": "No active session"}), 404

        base_url = app.config.get("PUBLIC_BASE_URL") or request.host_url
        url = container.session_service.join_url(base_url, session)
        png = container.session_service.qr_png(url)
        return send_file(io.BytesIO(png), mimetype="image/png")
