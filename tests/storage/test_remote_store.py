from __future__ import annotations

import httpx
import pytest

from src.hr_management.hr_management.core.exceptions import RemoteApiError
from src.hr_management.hr_management.storage.connection import StorageConfig, StoreFactory
from src.hr_management.hr_management.storage.json_store import JsonRecordStore
from src.hr_management.hr_management.storage.remote_store import RemoteRecordStore

API = "https://api.example.test/employees"


def test_list_and_get_from_remote_api():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/employees":
            return httpx.Response(200, json=[{"id": "1", "firstName": "Remote"}])
        if request.url.path == "/employees/1":
            return httpx.Response(200, json={"id": "1", "firstName": "Remote"})
        return httpx.Response(404)

    store = RemoteRecordStore(API, name="employees", transport=httpx.MockTransport(handler))

    assert store.list() == [{"id": "1", "firstName": "Remote"}]
    assert store.get("1")["firstName"] == "Remote"
    assert store.get("2") is None


def test_transport_errors_are_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json=[])

    store = RemoteRecordStore(API, name="employees", retry_attempts=3, transport=httpx.MockTransport(handler))

    assert store.list() == []
    assert len(calls) == 3


def test_unreachable_api_without_fallback_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    store = RemoteRecordStore(API, name="employees", retry_attempts=2, transport=httpx.MockTransport(handler))

    with pytest.raises(RemoteApiError):
        store.list()


def test_failures_are_served_from_local_fallback(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    local = JsonRecordStore(tmp_path / "employees.json")
    local.create({"firstName": "Local"})
    store = RemoteRecordStore(API, name="employees", fallback=local, transport=httpx.MockTransport(handler))

    assert [r["firstName"] for r in store.list()] == ["Local"]
    assert store.create({"firstName": "Second"})["id"] == "2"


def test_factory_uses_local_files_when_local_only(tmp_path):
    factory = StoreFactory(StorageConfig(data_dir=tmp_path, external_apis={"employees": API}))

    store = factory.open("employees")

    assert isinstance(store, JsonRecordStore)
    assert store.path == tmp_path / "employees.json"
    assert factory.open("employees") is store


def test_factory_proxies_configured_collections(tmp_path):
    factory = StoreFactory(
        StorageConfig(data_dir=tmp_path, use_local_data_only=False, external_apis={"employees": API}),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])),
    )

    assert isinstance(factory.open("employees"), RemoteRecordStore)
    assert isinstance(factory.open("departments"), JsonRecordStore)


def test_delete_of_unknown_remote_id_succeeds():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "not found"})

    store = RemoteRecordStore(API, name="employees", transport=httpx.MockTransport(handler))

    assert store.delete("77") is True


def test_factory_close_releases_http_clients(tmp_path):
    factory = StoreFactory(
        StorageConfig(data_dir=tmp_path, use_local_data_only=False, external_apis={"employees": API}),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])),
    )
    remote = factory.open("employees")
    factory.open("departments")

    factory.close()

    assert remote.closed
