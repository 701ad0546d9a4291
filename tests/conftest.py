# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from todo_api.config.settings import Settings
from todo_api.main import create_app

from .helpers import login, register


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file per test."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'todo.sqlite3'}",
        secret_key="test-secret",
        frontend_url="http://localhost:3000",
        log_level="WARNING",
    )


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture()
def alice(client: TestClient) -> str:
    """Bearer token for a freshly registered user."""
    register(client, "alice", "a@x.com")
    return login(client, "a@x.com")


@pytest.fixture()
def bob(client: TestClient) -> str:
    register(client, "bob", "b@x.com")
    return login(client, "b@x.com")
