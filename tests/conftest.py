"""Pytest fixtures for the Task Manager API tests."""

import pytest
from fastapi.testclient import TestClient

from task_manager.main import create_app
from task_manager.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    """A fresh, empty store for each test."""
    return TaskStore()


@pytest.fixture
def client(store: TaskStore) -> TestClient:
    """Create a test client for an application backed by ``store``."""
    return TestClient(create_app(store=store))
