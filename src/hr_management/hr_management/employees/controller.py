from __future__ import annotations

from flask import Flask, jsonify

from ..common.crud_routes import register_crud
from ..container import Container
from .service import filter_employees


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        resource="employees",
        label="Employee",
        repo=container.employees_repo,
        list_filter=filter_employees,
    )

    @app.route("/api/employees/<employee_id>/details", methods=["GET"], endpoint="employees_details")
    def employee_details(employee_id: str):
        # NotFoundError is turned into a 404 by the app error handler
        return jsonify(container.employee_service.get_profile(employee_id))
