from __future__ import annotations

from flask import Flask, jsonify, request

from ..admin.controller import admin_required
from ..container import Container
from ..core.constants import CSV_EXPORT_FILENAME
from ..core.exceptions import ReliabilityError, StoreError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/check-in", methods=["POST"], endpoint="check_in")
    def check_in():
        data = request.get_json(silent=True) or {}
        try:
            result = container.record_service.check_in(
                student_name=data.get("studentName"),
                student_id=data.get("studentId"),
                session_id=data.get("sessionId"),
                session_name=data.get("sessionName"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (ReliabilityError, StoreError, OSError) as e:
            return jsonify({"success": False, "message": str(e)}), 500

        if not result.added:
            return jsonify({
                "success": False,
                "duplicate": True,
                "message": "You have already marked your attendance for this session.",
            }), 409
        return jsonify({"success": True, "duplicate": False, "record": result.record.to_dict()}), 201

    @app.route("/api/records/by-day", methods=["GET"], endpoint="records_by_day")
    def records_by_day():
        try:
            groups = container.record_service.grouped_by_day()
        except ReliabilityError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify(groups)

    @app.route("/api/records.csv", methods=["GET"], endpoint="records_csv")
    @admin_required
    def records_csv():
        try:
            content = container.record_service.export_csv()
        except ReliabilityError as e:
            return jsonify({"success": False, "message": str(e)}), 500

        return app.response_class(
            content.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={CSV_EXPORT_FILENAME}"},
        )
