"""
pytest configuration and fixtures.
"""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Keep test runs out of the real request log.  Must happen before the app
# (and its settings) are imported.
os.environ.setdefault("LOG_FILE", "")

from employee_api.app.main import create_app
from employee_api.app.schemas.employee import EmployeeCreate
from employee_api.app.services.employee_service import EmployeeStore


@pytest.fixture
def store() -> EmployeeStore:
    """Fresh, empty employee store."""
    return EmployeeStore()


@pytest.fixture
def client(store: EmployeeStore) -> Generator[TestClient, None, None]:
    """HTTP client for an application bound to ``store``."""
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def sample_employee() -> dict:
    """Sample employee payload."""
    return {
        "name": "Alice Johnson",
        "position": "Software Engineer",
        "salary": 85000.0,
    }


@pytest.fixture
def populated_store(store: EmployeeStore) -> EmployeeStore:
    """Store holding 25 employees with ids 1..25."""
    for i in range(1, 26):
        store.create(EmployeeCreate(name=f"Employee {i}", position="Engineer", salary=1000.0 * i))
    return store
