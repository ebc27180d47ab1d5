"""
HTTP-level tests for the users routes using FastAPI's TestClient.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Makes the users_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from users_api.app import create_app  # noqa: E402
from users_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Points USERS_DATA_FILE at a temporary file and resets the settings cache."""
    path = tmp_path / "data.json"
    monkeypatch.setenv("USERS_DATA_FILE", str(path))
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(data_file):
    return TestClient(create_app())


def _stored(path: Path) -> list:
    return json.loads(path.read_text(encoding="utf-8"))


def test_get_then_delete_single_record(client, data_file):
    data_file.write_text('[{"id":1,"name":"Ann","role":"admin"}]', encoding="utf-8")

    resp = client.get("/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Ann", "role": "admin"}

    resp = client.delete("/1")
    assert resp.status_code == 200
    assert resp.content == b""
    assert _stored(data_file) == []

    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == []


def test_post_into_empty_collection(client, data_file):
    data_file.write_text("[]", encoding="utf-8")

    resp = client.post("/", json={"name": "Bo", "role": "user"})
    assert resp.status_code == 200
    assert resp.content == b""

    users = _stored(data_file)
    assert len(users) == 1
    assert users[0]["name"] == "Bo"
    assert users[0]["role"] == "user"

    listed = client.get("/").json()
    assert listed == users
    assert isinstance(listed[0]["id"], int)


def test_post_with_missing_fields_stores_them_absent(client, data_file):
    data_file.write_text("[]", encoding="utf-8")
    assert client.post("/", json={"name": "Solo"}).status_code == 200
    assert client.post("/").status_code == 200
    assert _stored(data_file) == [{"id": 1, "name": "Solo"}, {"id": 2}]


def test_put_updates_record(client, data_file):
    data_file.write_text('[{"id":1,"name":"Ann","role":"admin"}]', encoding="utf-8")

    resp = client.put("/1", json={"name": "Annie", "role": "owner"})
    assert resp.status_code == 200
    assert resp.content == b""
    assert client.get("/1").json() == {"id": 1, "name": "Annie", "role": "owner"}


@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("get", {}),
        ("put", {"json": {"name": "Ghost", "role": "none"}}),
        ("delete", {}),
    ],
)
def test_unknown_id_returns_404_and_leaves_file(client, data_file, method, kwargs):
    data_file.write_text('[{"id":1,"name":"Ann","role":"admin"},{"id":2,"name":"Bo","role":"user"}]', encoding="utf-8")
    before = data_file.read_text(encoding="utf-8")

    resp = getattr(client, method)("/99", **kwargs)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "User not found"}
    assert data_file.read_text(encoding="utf-8") == before


def test_non_numeric_id_is_not_found(client, data_file):
    data_file.write_text('[{"id":1,"name":"Ann","role":"admin"}]', encoding="utf-8")
    assert client.get("/abc").status_code == 404


def test_overlong_numeric_id_is_not_found(client, data_file):
    data_file.write_text('[{"id":1,"name":"Ann","role":"admin"}]', encoding="utf-8")
    resp = client.get("/" + "1" * 5000)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "User not found"}


def test_missing_data_file_returns_500(client, data_file):
    resp = client.get("/")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Storage unavailable"}
    assert not data_file.exists()


def test_corrupt_data_file_returns_500(client, data_file):
    data_file.write_text("{oops", encoding="utf-8")
    assert client.post("/", json={"name": "x", "role": "y"}).status_code == 500
    assert data_file.read_text(encoding="utf-8") == "{oops"
