from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ReliabilityError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sync", methods=["GET"], endpoint="sync_read")
    def sync_read():
        try:
            db = container.sync_service.snapshot()
        except ReliabilityError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify(db.to_dict())

    @app.route("/api/sync", methods=["POST"], endpoint="sync_write")
    def sync_write():
        body = request.get_json(silent=True, force=True)
        if body is None:
            return jsonify({"success": False, "message": "Request body must be JSON"}), 400

        try:
            db = container.sync_service.dispatch(body)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (ReliabilityError, StoreError, OSError) as e:
            logger.exception("Write failed")
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify(db.to_dict())

    @app.route("/api/store-check", methods=["GET"], endpoint="store_check")
    def store_check():
        result = container.sync_service.store_check()
        return jsonify(result), (200 if result["ok"] else 500)

    @app.route("/api/config", methods=["GET"], endpoint="client_config")
    def client_config():
        return jsonify({
            "pollIntervalMs": int(app.config["POLL_INTERVAL_MS"]),
            "mode": container.sync_service.mode.value,
        })
