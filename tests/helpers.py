# tests/helpers.py

from __future__ import annotations

from fastapi.testclient import TestClient


def register(client: TestClient, username: str, email: str, password: str = "pw"):
    return client.post("/register", json={"username": username, "email": email, "password": password})


def login(client: TestClient, email: str, password: str = "pw") -> str:
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
