from __future__ import annotations

import logging
from dataclasses import asdict
from functools import wraps

from flask import Flask, jsonify

from ..core.exceptions import DomainError, NotFoundError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except DomainError as e:
                logger.warning("Rejected attendance request: %s", e)
                return jsonify({"success": False, "message": str(e)}), 400

        return wrapper

    @app.route("/api/students/<student_id>/attendance", endpoint="student_attendance")
    @json_errors
    def student_attendance(student_id: str):
        view = container.attendance_service.get_attendance_view(student_id)
        return jsonify({"success": True, "data": asdict(view)})

    @app.route("/api/students/<student_id>/attendance/chart", endpoint="student_attendance_chart")
    @json_errors
    def student_attendance_chart(student_id: str):
        data = container.attendance_service.get_chart_data(student_id)
        return jsonify({"success": True, "data": data})

    @app.route("/api/students/<student_id>/attendance/overview", endpoint="student_attendance_overview")
    @json_errors
    def student_attendance_overview(student_id: str):
        data = container.attendance_service.get_overview_chart(student_id)
        return jsonify({"success": True, "data": data})

    @app.route(
        "/api/students/<student_id>/attendance/subjects/<subject_id>",
        endpoint="student_subject_attendance",
    )
    @json_errors
    def student_subject_attendance(student_id: str, subject_id: str):
        data = container.attendance_service.get_subject_attendance(student_id, subject_id)
        return jsonify({"success": True, "data": data})
