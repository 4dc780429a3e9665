from __future__ import annotations

from flask import Flask, jsonify

from ..common.crud_routes import json_body
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            user = container.auth_service.authenticate(str(data.get("username") or ""), str(data.get("password") or ""))
        except (AuthenticationError, ValidationError) as e:
            return jsonify({"error": str(e)}), 401
        return jsonify(user.to_dict())
