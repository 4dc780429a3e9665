from __future__ import annotations

from flask import Flask, jsonify

from ..common.crud_routes import not_found, register_crud
from ..container import Container
from .service import filter_leaves


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        resource="leaves",
        label="Leave request",
        repo=container.leaves_repo,
        list_filter=filter_leaves,
        by_employee=True,
    )

    @app.route("/api/leaves/<leave_id>/approve", methods=["PUT"], endpoint="leaves_approve")
    def approve_leave(leave_id: str):
        leave = container.leaves_repo.approve(leave_id)
        if leave is None:
            return not_found("Leave request")
        return jsonify(leave)

    @app.route("/api/leaves/<leave_id>/reject", methods=["PUT"], endpoint="leaves_reject")
    def reject_leave(leave_id: str):
        leave = container.leaves_repo.reject(leave_id)
        if leave is None:
            return not_found("Leave request")
        return jsonify(leave)
