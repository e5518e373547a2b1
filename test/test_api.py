from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app, cors_settings
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[task_repository] = lambda: repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create(client, title="Buy groceries", description="Milk, eggs, bread"):
    return client.post("/api/tasks", json={"title": title, "description": description})


def test_create_task_returns_wire_view(client, repo):
    response = _create(client)

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "title", "description", "status", "createdAt", "updatedAt"}
    assert body["status"] == "pending"
    assert body["title"] == "Buy groceries"
    assert body["createdAt"] == body["updatedAt"]
    assert repo.size() == 1


def test_create_task_with_blank_title_is_rejected(client, repo):
    response = _create(client, title="   ", description="x")

    assert response.status_code == 422
    assert response.json()["detail"] == "title required"
    assert repo.size() == 0


def test_create_task_with_caller_id(client):
    raw_id = str(uuid4())

    response = client.post(
        "/api/tasks", json={"title": "t", "description": "d", "id": raw_id}
    )

    assert response.status_code == 201
    assert response.json()["id"] == raw_id


def test_list_tasks_empty(client):
    response = client.get("/api/tasks")

    assert response.status_code == 200
    assert response.json() == []


def test_get_task(client):
    created = _create(client).json()

    response = client.get(f"/api/tasks/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_task_not_found(client):
    response = client.get(f"/api/tasks/{uuid4()}")

    assert response.status_code == 404


def test_get_task_malformed_id(client):
    response = client.get("/api/tasks/123")

    assert response.status_code == 422
    assert response.json()["detail"] == "identifier malformed"


def test_update_task(client):
    created = _create(client).json()

    response = client.patch(
        f"/api/tasks/{created['id']}", json={"title": "  Renamed "}
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Renamed"
    assert response.json()["description"] == created["description"]


def test_change_status_flow(client):
    task_id = _create(client).json()["id"]

    started = client.post(f"/api/tasks/{task_id}/status", json={"status": "in_progress"})
    again = client.post(f"/api/tasks/{task_id}/status", json={"status": "in_progress"})
    done = client.post(f"/api/tasks/{task_id}/status", json={"status": "completed"})

    assert started.status_code == 200
    assert started.json()["status"] == "in_progress"
    assert again.status_code == 409
    assert again.json()["detail"] == "not pending"
    assert done.json()["status"] == "completed"


def test_change_status_unknown_literal(client):
    task_id = _create(client).json()["id"]

    response = client.post(f"/api/tasks/{task_id}/status", json={"status": "archived"})

    assert response.status_code == 422


def test_delete_task(client, repo):
    task_id = _create(client).json()["id"]

    assert client.delete(f"/api/tasks/{task_id}").status_code == 204
    assert client.delete(f"/api/tasks/{task_id}").status_code == 404
    assert repo.size() == 0


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
    assert response.json()["repository"] == "memory"


def test_cors_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", " http://a.test , http://b.test ,")
    monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "False")
    monkeypatch.setenv("CORS_ALLOW_METHODS", "GET,POST")
    monkeypatch.delenv("CORS_ALLOW_HEADERS", raising=False)

    assert cors_settings() == {
        "allow_origins": ["http://a.test", "http://b.test"],
        "allow_credentials": False,
        "allow_methods": ["GET", "POST"],
        "allow_headers": ["*"],
    }


def test_cors_preflight_is_answered(client):
    response = client.options(
        "/api/tasks",
        headers={"Origin": "http://a.test", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers
