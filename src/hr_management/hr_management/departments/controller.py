from __future__ import annotations

from flask import Flask

from ..common.crud_routes import register_crud
from ..container import Container
from .service import filter_departments


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        resource="departments",
        label="Department",
        repo=container.departments_repo,
        list_filter=filter_departments,
    )
