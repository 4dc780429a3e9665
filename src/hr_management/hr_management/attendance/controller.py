from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.crud_routes import register_crud
from ..container import Container
from .service import filter_attendance


def register(app: Flask, container: Container) -> None:
    # Static segments win over /api/attendance/<record_id> in werkzeug routing.
    @app.route("/api/attendance/rate", methods=["GET"], endpoint="attendance_rate")
    def attendance_rate():
        employee_id = request.args.get("employeeId") or None
        return jsonify(container.attendance_service.get_rate(employee_id=employee_id))

    @app.route("/api/attendance/absence-trend", methods=["GET"], endpoint="attendance_absence_trend")
    def attendance_absence_trend():
        employee_id = request.args.get("employeeId") or None
        return jsonify(container.attendance_service.get_absence_trend(employee_id=employee_id))

    register_crud(
        app,
        resource="attendance",
        label="Attendance record",
        repo=container.attendance_repo,
        list_filter=filter_attendance,
        by_employee=True,
    )
