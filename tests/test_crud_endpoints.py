from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from persistence import RESOURCES


def test_create_then_data_lists_item(client):
    r = client.post("/api/projects", json={"title": "X"})
    assert r.status_code == 200
    created = r.json()
    assert created["title"] == "X"
    assert isinstance(created["id"], str) and created["id"]

    data = client.get("/api/data").json()
    assert data["projects"] == [created]
    assert "admin" not in data


@pytest.mark.parametrize("resource", RESOURCES)
def test_every_resource_has_crud_routes(client, resource):
    created = client.post(f"/api/{resource}", json={"name": "n"}).json()

    r = client.put(f"/api/{resource}/{created['id']}", json={"name": "m"})
    assert r.status_code == 200
    assert r.json() == {"id": created["id"], "name": "m"}

    r = client.delete(f"/api/{resource}/{created['id']}")
    assert r.json() == {"success": True}
    assert client.get("/api/data").json()[resource] == []


def test_create_ignores_caller_id_and_ids_are_unique(client):
    ids = {client.post("/api/signals", json={"id": "mine", "text": str(n)}).json()["id"] for n in range(20)}

    assert len(ids) == 20
    assert "mine" not in ids


def test_update_replaces_item_in_place(client):
    first = client.post("/api/certificates", json={"title": "A", "issuer": "Old"}).json()
    second = client.post("/api/certificates", json={"title": "B"}).json()

    r = client.put(f"/api/certificates/{first['id']}", json={"title": "A2", "id": "ignored"})

    assert r.status_code == 200
    assert r.json() == {"id": first["id"], "title": "A2"}
    certs = client.get("/api/data").json()["certificates"]
    assert certs == [{"id": first["id"], "title": "A2"}, second]


def test_update_missing_item_is_404_and_leaves_document(client, sandbox_env):
    client.post("/api/partners", json={"name": "ACME"})
    before = sandbox_env.read_text(encoding="utf-8")

    r = client.put("/api/partners/nope", json={"name": "Other"})

    assert r.status_code == 404
    assert r.json() == {"error": "Item not found"}
    assert sandbox_env.read_text(encoding="utf-8") == before


def test_delete_is_idempotent_and_removes_all_matches(client, sandbox_env):
    doc = {
        "projects": [{"id": "dup", "n": 1}, {"id": "keep"}, {"id": "dup", "n": 2}],
        "admin": {"password": "s3cret"},
    }
    sandbox_env.parent.mkdir(parents=True, exist_ok=True)
    sandbox_env.write_text(json.dumps(doc), encoding="utf-8")

    r = client.delete("/api/projects/dup")
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert client.get("/api/data").json()["projects"] == [{"id": "keep"}]

    r = client.delete("/api/projects/dup")
    assert r.status_code == 200
    assert r.json() == {"success": True}


def test_non_object_body_is_rejected(client):
    r = client.post("/api/projects", json=["not", "an", "object"])

    assert r.status_code == 400
    assert "error" in r.json()


def test_failed_write_reports_500(sandbox_env):
    import app as app_module

    class ReadOnlyBackend:
        kind = "readonly"

        def load(self):
            return None

        def save(self, doc):
            raise PermissionError("read-only")

    client = TestClient(app_module.create_app(backend=ReadOnlyBackend()))

    r = client.post("/api/projects", json={"title": "X"})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to save data"}
    assert client.get("/api/data").json()["projects"] == []


def test_legacy_numeric_ids_survive_a_create(client, sandbox_env):
    stored = {
        "projects": [{"id": 1700000000000, "title": "Legacy"}],
        "partners": [{"id": "p1", "name": "ACME"}],
        "admin": {"password": "mine"},
        "theme": {"a": 1},
    }
    sandbox_env.parent.mkdir(parents=True, exist_ok=True)
    sandbox_env.write_text(json.dumps(stored), encoding="utf-8")

    data = client.get("/api/data").json()
    assert data["projects"] == [{"id": "1700000000000", "title": "Legacy"}]

    r = client.post("/api/signals", json={"text": "hi"})
    assert r.status_code == 200

    on_disk = json.loads(sandbox_env.read_text(encoding="utf-8"))
    assert on_disk["projects"] == [{"id": "1700000000000", "title": "Legacy"}]
    assert on_disk["partners"] == [{"id": "p1", "name": "ACME"}]
    assert on_disk["admin"] == {"password": "mine"}
    assert on_disk["theme"] == {"a": 1}
    assert [s["text"] for s in on_disk["signals"]] == ["hi"]

    r = client.put("/api/projects/1700000000000", json={"title": "Renamed"})
    assert r.json() == {"id": "1700000000000", "title": "Renamed"}


def test_unloadable_document_is_not_overwritten(client, sandbox_env):
    original = json.dumps({"projects": [{"title": "missing id"}], "partners": [{"id": "p1"}]})
    sandbox_env.parent.mkdir(parents=True, exist_ok=True)
    sandbox_env.write_text(original, encoding="utf-8")

    for r in (
        client.post("/api/signals", json={"text": "hi"}),
        client.delete("/api/partners/p1"),
        client.post("/api/admin/seed"),
    ):
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to save data"}

    assert sandbox_env.read_text(encoding="utf-8") == original
