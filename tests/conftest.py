from __future__ import annotations

import os
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["JWT_SECRET"] = "test-secret"
    os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture()
def client(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Any:
    from skillgap.config import settings
    from skillgap.database import Base, engine
    from skillgap.main import create_app

    # Uploaded resumes land in a per-test directory.
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c


def _register_and_login(client: TestClient, email: str, password: str = "SecretPass123", name: str = "Test User") -> dict[str, str]:
    r = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
    assert r.status_code == 201
    r = client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture()
def register_and_login(client: TestClient) -> Callable[..., dict[str, str]]:
    def _register(email: str, password: str = "SecretPass123", name: str = "Test User") -> dict[str, str]:
        return _register_and_login(client, email, password, name)

    return _register


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    return _register_and_login(client, "learner@example.com")
