from __future__ import annotations

import importlib
import logging
import traceback
from typing import Any, Mapping, Optional

import httpx
from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from . import __version__
from .container import build_container
from .core.constants import ENDPOINTS, SERVICE_NAME
from .core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .common.datetime_utils import utc_timestamp
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .dashboard.controller import register as register_dashboard
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .salaries.controller import register as register_salaries

logger = logging.getLogger(__name__)


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthenticationError)
    def handle_auth(e: AuthenticationError):
        return jsonify({"error": str(e)}), 401

    @app.errorhandler(404)
    def handle_unknown_route(e):
        return (
            jsonify(
                {
                    "error": "Not Found",
                    "message": f"Route {request.method} {request.full_path.rstrip('?')} not found",
                    "availableEndpoints": {"root": "/", **ENDPOINTS},
                }
            ),
            404,
        )

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return jsonify({"error": e.name, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.error("Global Error: %s", e, exc_info=True)
        body: dict[str, Any] = {"error": str(e) or "Internal server error"}
        if app.config.get("DEBUG", False):
            body["details"] = "".join(traceback.format_exception(type(e), e, e.__traceback__))
        return jsonify(body), 500


def create_app(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(overrides)

    logging.basicConfig(
        level=getattr(logging, str(settings.get("LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.json.sort_keys = False

    logger.info(
        "settings=%s data_dir=%s local_only=%s",
        settings["SETTINGS_MODULE"],
        settings.get("DATA_DIR"),
        settings.get("USE_LOCAL_DATA_ONLY"),
    )

    container = build_container(settings=settings, transport=transport)
    app.extensions["hr_container"] = container

    @app.before_request
    def log_request():
        logger.info("%s %s", request.method, request.full_path.rstrip("?"))

    @app.route("/", methods=["GET"], endpoint="root")
    def root():
        return jsonify(
            {
                "name": SERVICE_NAME,
                "version": __version__,
                "status": "running",
                "timestamp": utc_timestamp(),
                "endpoints": dict(ENDPOINTS),
            }
        )

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "service": "hr-management"})

    register_auth(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_salaries(app, container)
    register_dashboard(app, container)

    _register_error_handlers(app)
    return app


def run() -> None:
    settings = load_settings()
    app = create_app()
    logger.info("HR Management API running on http://%s:%s", settings["HOST"], settings["PORT"])
    try:
        app.run(host=settings["HOST"], port=int(settings["PORT"]), debug=bool(settings.get("DEBUG", False)))
    finally:
        app.extensions["hr_container"].stores.close()


if __name__ == "__main__":
    run()
