from __future__ import annotations

from pathlib import Path
import sys

import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

REMOTE_ENV = ("KV_REST_API_URL", "KV_REST_API_TOKEN", "REDIS_URL", "STORAGE_KEY")


@pytest.fixture
def sandbox_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point the file backend at a temp file and hide any remote store config so
    tests never touch real ./data or a real service.
    """
    for name in REMOTE_ENV:
        monkeypatch.delenv(name, raising=False)
    data_file = tmp_path / "data" / "portfolio.json"
    monkeypatch.setenv("DATA_FILE", str(data_file))
    monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")
    monkeypatch.setenv("TOKEN_SECRET", "test-secret")
    return data_file


@pytest.fixture
def client(sandbox_env: Path):
    from fastapi.testclient import TestClient

    import app as app_module

    with TestClient(app_module.create_app()) as c:
        yield c


class FakeRedis:
    """Just enough of redis.Redis for RedisDocumentStore."""

    def __init__(self) -> None:
        self.values: dict[str, bytes] = {}
        self.closed = False

    def get(self, key: str) -> bytes | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> bool:
        self.values[key] = value.encode("utf-8")
        return True

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()
