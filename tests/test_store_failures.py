# tests/test_store_failures.py

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from todo_api.database import get_db

from .helpers import auth_header


class UnavailableSession:
    """Session stand-in whose every query fails like a dropped database."""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    async def rollback(self) -> None:
        pass


async def unavailable_db():
    yield UnavailableSession()


@pytest.fixture()
def broken_store(client: TestClient, alice: str) -> Iterator[str]:
    client.app.dependency_overrides[get_db] = unavailable_db
    yield alice
    client.app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "method, path, body, message",
    [
        ("get", "/todos", None, "Error fetching tasks"),
        ("get", "/todos/abc", None, "Error fetching task"),
        ("put", "/todos/abc", {"title": "t", "status": "open", "priority": "low"}, "Error updating task"),
        ("patch", "/todos/abc", {"status": "done"}, "Error updating task"),
        ("delete", "/todos/abc", None, "Error deleting task"),
    ],
)
def test_task_routes_report_store_failure(
    client: TestClient, broken_store: str, method: str, path: str, body, message: str
) -> None:
    kwargs = {"headers": auth_header(broken_store)}
    if body is not None:
        kwargs["json"] = body

    response = client.request(method.upper(), path, **kwargs)
    assert response.status_code == 500
    payload = response.json()
    assert payload["message"] == message
    assert "database is locked" in payload["error"]


def test_register_reports_store_failure(client: TestClient, broken_store: str) -> None:
    response = client.post("/register", json={"username": "carol", "email": "c@x.com", "password": "pw"})
    assert response.status_code == 500
    assert response.json()["message"] == "Error creating user"
    assert "database is locked" in response.json()["error"]


def test_login_reports_store_failure(client: TestClient, broken_store: str) -> None:
    response = client.post("/login", json={"email": "a@x.com", "password": "pw"})
    assert response.status_code == 500
    assert response.json()["message"] == "Error logging in"
    assert "database is locked" in response.json()["error"]
