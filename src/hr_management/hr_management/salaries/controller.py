from __future__ import annotations

from flask import Flask, jsonify

from ..common.crud_routes import register_crud
from ..container import Container
from .service import filter_salaries, salary_distribution


def register(app: Flask, container: Container) -> None:
    @app.route("/api/salaries/distribution", methods=["GET"], endpoint="salaries_distribution")
    def salaries_distribution():
        return jsonify(salary_distribution(container.salaries_repo.list_all()))

    register_crud(
        app,
        resource="salaries",
        label="Salary",
        repo=container.salaries_repo,
        list_filter=filter_salaries,
        by_employee=True,
    )
