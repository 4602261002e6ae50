"""Tests for request body validation and malformed input handling."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from task_manager.models import TaskCreate, TaskPriority, TaskStatus, TaskUpdate
from task_manager.store import TaskStore


def test_create_task_missing_title(client: TestClient, store: TaskStore) -> None:
    response = client.post("/api/tasks", json={"description": "no title"})
    assert response.status_code == 400
    assert response.json()["detail"] == "title is required"
    assert len(store) == 0


def test_create_task_empty_title(client: TestClient) -> None:
    """Test that empty title is rejected."""
    response = client.post("/api/tasks", json={"title": ""})
    assert response.status_code == 400
    assert response.json()["detail"] == "title is required"


def test_create_task_title_too_long(client: TestClient, store: TaskStore) -> None:
    """Test that too-long title is rejected and nothing is stored."""
    response = client.post("/api/tasks", json={"title": "x" * 201})
    assert response.status_code == 400
    assert response.json()["detail"] == "title must be at most 200 characters"
    assert len(store) == 0


def test_create_task_title_at_limit(client: TestClient) -> None:
    response = client.post("/api/tasks", json={"title": "x" * 200})
    assert response.status_code == 201


def test_create_task_invalid_priority(client: TestClient, store: TaskStore) -> None:
    response = client.post("/api/tasks", json={"title": "t", "priority": "urgent"})
    assert response.status_code == 400
    assert response.json()["detail"] == "priority must be low, medium, or high"
    assert len(store) == 0


def test_create_task_invalid_status(client: TestClient) -> None:
    response = client.post("/api/tasks", json={"title": "t", "status": "done"})
    assert response.status_code == 400
    assert response.json()["detail"] == "status must be pending, in-progress, or completed"


def test_first_violation_wins(client: TestClient) -> None:
    response = client.post(
        "/api/tasks", json={"title": "", "priority": "urgent", "status": "done"}
    )
    assert response.json()["detail"] == "title is required"

    response = client.post(
        "/api/tasks", json={"title": "ok", "priority": "urgent", "status": "done"}
    )
    assert response.json()["detail"] == "priority must be low, medium, or high"


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        '{"title": "unterminated"',
        "[]",
        '{"title": 42}',
    ],
)
def test_create_task_malformed_body(client: TestClient, store: TaskStore, body: str) -> None:
    response = client.post(
        "/api/tasks",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"
    assert len(store) == 0


def test_update_invalid_priority(client: TestClient) -> None:
    task_id = client.post("/api/tasks", json={"title": "t"}).json()["id"]

    response = client.patch(f"/api/tasks/{task_id}", json={"priority": "urgent"})
    assert response.status_code == 400
    assert response.json()["detail"] == "priority must be low, medium, or high"
    assert client.get(f"/api/tasks/{task_id}").json()["priority"] == "medium"


def test_update_title_too_long(client: TestClient) -> None:
    task_id = client.post("/api/tasks", json={"title": "t"}).json()["id"]

    response = client.patch(f"/api/tasks/{task_id}", json={"title": "x" * 201})
    assert response.status_code == 400
    assert client.get(f"/api/tasks/{task_id}").json()["title"] == "t"


def test_update_malformed_body(client: TestClient) -> None:
    task_id = client.post("/api/tasks", json={"title": "t"}).json()["id"]

    response = client.patch(
        f"/api/tasks/{task_id}",
        content="{oops",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"


def test_task_create_defaults() -> None:
    data = TaskCreate(title="Defaults", status="", priority=None)
    assert data.status is TaskStatus.PENDING
    assert data.priority is TaskPriority.MEDIUM
    assert data.description == ""


def test_task_create_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        TaskCreate(title="t", status="archived")


def test_task_update_changes_skip_empty_fields() -> None:
    data = TaskUpdate(title="", description="new", status="completed")
    assert data.changes() == {"description": "new", "status": TaskStatus.COMPLETED}
    assert TaskUpdate().changes() == {}
