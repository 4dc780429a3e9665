from __future__ import annotations

import pytest

from src.hr_management.hr_management.main import create_app
from src.hr_management.hr_management.storage.connection import StorageConfig, StoreFactory


@pytest.fixture
def stores(tmp_path):
    return StoreFactory(StorageConfig(data_dir=tmp_path))


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "DATA_DIR": str(tmp_path),
            "USE_LOCAL_DATA_ONLY": True,
            "DEBUG": False,
            "TESTING": True,
            "LOG_LEVEL": "WARNING",
        }
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()
