from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from flask import Flask, jsonify, request

from ..storage.entity_repository import EntityRepository

ListFilter = Callable[[Sequence[dict], Any], Sequence[dict]]


def json_body() -> dict:
    """Request JSON body; an empty, non-JSON or non-object body reads as ``{}``."""

    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def not_found(label: str):
    return jsonify({"error": f"{label} not found"}), 404


def register_crud(
    app: Flask,
    *,
    resource: str,
    label: str,
    repo: EntityRepository,
    list_filter: Optional[ListFilter] = None,
    by_employee: bool = False,
) -> None:
    """Register the REST routes shared by every entity under ``/api/<resource>``.

    ``list_filter(records, request.args)`` narrows the list route; it is only
    applied when the request carries query parameters.
    """

    base = f"/api/{resource}"

    @app.route(base, methods=["GET"], endpoint=f"{resource}_list")
    def list_records():
        records = repo.list_all()
        if list_filter is not None and request.args:
            records = list_filter(records, request.args)
        return jsonify(list(records))

    @app.route(f"{base}/<record_id>", methods=["GET"], endpoint=f"{resource}_get")
    def get_record(record_id: str):
        record = repo.get_by_id(record_id)
        if record is None:
            return not_found(label)
        return jsonify(record)

    if by_employee:

        @app.route(f"{base}/employee/<employee_id>", methods=["GET"], endpoint=f"{resource}_by_employee")
        def list_by_employee(employee_id: str):
            return jsonify(list(repo.list_by_employee(employee_id)))

    @app.route(base, methods=["POST"], endpoint=f"{resource}_create")
    def create_record():
        return jsonify(repo.create(json_body())), 201

    @app.route(f"{base}/<record_id>", methods=["PUT"], endpoint=f"{resource}_update")
    def update_record(record_id: str):
        record = repo.update(record_id, json_body())
        if record is None:
            return not_found(label)
        return jsonify(record)

    @app.route(f"{base}/<record_id>", methods=["DELETE"], endpoint=f"{resource}_delete")
    def delete_record(record_id: str):
        repo.delete_by_id(record_id)
        return jsonify({"success": True, "message": f"{label} deleted successfully"})
