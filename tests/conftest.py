from __future__ import annotations

from typing import Sequence

import pytest

from employee_records.employees.model import Employee
from employee_records.employees.store import EmployeeStore
from employee_records.main import create_app


class InMemoryEmployees:
    """Repository fake: keeps the last saved collection and counts writes."""

    def __init__(self, initial: Sequence[Employee] = ()):
        self.saved: list[Employee] = list(initial)
        self.save_calls = 0

    def load_all(self) -> Sequence[Employee]:
        return list(self.saved)

    def save_all(self, employees: Sequence[Employee]) -> None:
        self.save_calls += 1
        self.saved = list(employees)


def make_employee(employee_id: int, **overrides) -> Employee:
    data = {
        "id": employee_id,
        "first_name": f"First{employee_id}",
        "last_name": f"Last{employee_id}",
        "email": f"user{employee_id}@example.com",
        "department": "General",
        "position": "Employee",
        "salary": 0.0,
        "hire_date": "2024-01-01",
    }
    data.update(overrides)
    return Employee(**data)


@pytest.fixture
def repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def store(repo) -> EmployeeStore:
    return EmployeeStore(repo, today=lambda: "2026-10-17")


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"DATA_DIR": str(tmp_path / "data"), "AUTO_SEED_DATA": False})
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client) -> dict:
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}


@pytest.fixture
def employee_factory():
    return make_employee
