from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Iterable, Mapping

from ..common.datetime_utils import today_iso
from ..common.validators import clean_str, coerce_salary, require_non_empty
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_POSITION
from ..core.exceptions import NotFoundError, PersistenceError, ValidationError
from .model import KEY_FIELDS, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (("firstName", "First name"), ("lastName", "Last name"), ("email", "Email"))


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValidationError("Active must be true or false")



class EmployeeStore:
    """Owns the employee collection and the id counter.

    The whole collection is loaded once from the repository and written back
    after every mutation. A failed write leaves the in-memory change in place
    and re-raises PersistenceError.
    """

    def __init__(self, repository: EmployeeRepository, *, today: Callable[[], str] = today_iso):
        self._repository = repository
        self._today = today
        self._employees: list[Employee] = list(repository.load_all())
        self._next_id = max((e.id for e in self._employees), default=0) + 1

    def __len__(self) -> int:
        return len(self._employees)

    def _index_of(self, employee_id: int) -> int:
        for i, e in enumerate(self._employees):
            if e.id == employee_id:
                return i
        raise NotFoundError("Employee not found")

    def _persist(self) -> None:
        try:
            self._repository.save_all(self._employees)
        except PersistenceError:
            logger.error("Saving employees failed; in-memory state is ahead of the data file", exc_info=True)
            raise

    def _build(self, employee_id: int, data: Mapping[str, Any]) -> Employee:
        if not isinstance(data, Mapping):
            raise ValidationError("Employee data must be an object")

        first_name, last_name, email = (require_non_empty(data.get(key), label) for key, label in REQUIRED_KEYS)
        return Employee(
            id=employee_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=clean_str(data.get("phone")),
            department=clean_str(data.get("department"), DEFAULT_DEPARTMENT),
            position=clean_str(data.get("position"), DEFAULT_POSITION),
            salary=coerce_salary(data.get("salary")),
            hire_date=clean_str(data.get("hireDate")) or self._today(),
            profile_photo=clean_str(data.get("profilePhoto")),
            active=True,
        )

    def get_by_id(self, employee_id: int) -> Employee:
        return self._employees[self._index_of(employee_id)]

    def list_active(self) -> list[Employee]:
        return [e for e in self._employees if e.active is not False]

    def list_all(self) -> list[Employee]:
        return list(self._employees)

    def create(self, data: Mapping[str, Any]) -> Employee:
        employee = self._build(self._next_id, data)
        self._next_id += 1
        self._employees.append(employee)
        logger.info("Created employee id=%s (%s)", employee.id, employee.full_name)
        self._persist()
        return employee

    def create_many(self, rows: Iterable[Mapping[str, Any]]) -> list[Employee]:
        """Create a batch with one write; nothing is stored if any row is invalid."""
        built: list[Employee] = []
        next_id = self._next_id
        for row_no, data in enumerate(rows, start=1):
            try:
                built.append(self._build(next_id, data))
            except ValidationError as e:
                raise ValidationError(f"Row {row_no}: {e}") from e
            next_id += 1

        if not built:
            return []

        self._next_id = next_id
        self._employees.extend(built)
        logger.info("Imported %d employees (ids %s-%s)", len(built), built[0].id, built[-1].id)
        self._persist()
        return built

    def update(self, employee_id: int, partial: Mapping[str, Any]) -> Employee:
        index = self._index_of(employee_id)
        if not isinstance(partial, Mapping):
            raise ValidationError("Employee data must be an object")

        current = self._employees[index]
        changes: dict[str, Any] = {}
        for key, value in partial.items():
            attr = KEY_FIELDS.get(key)
            if attr is None or attr == "id":
                continue
            if key in ("firstName", "lastName", "email"):
                label = dict(REQUIRED_KEYS)[key]
                changes[attr] = require_non_empty(value, label)
            elif attr == "salary":
                changes[attr] = coerce_salary(value)
            elif attr == "active":
                if value is not None:
                    changes[attr] = _as_bool(value)
            elif attr == "department":
                changes[attr] = clean_str(value, DEFAULT_DEPARTMENT)
            elif attr == "position":
                changes[attr] = clean_str(value, DEFAULT_POSITION)
            elif attr == "hire_date":
                changes[attr] = clean_str(value, current.hire_date)
            else:
                changes[attr] = clean_str(value)

        updated = replace(current, **changes)
        self._employees[index] = updated
        logger.info("Updated employee id=%s fields=%s", employee_id, sorted(changes))
        self._persist()
        return updated

    def soft_delete(self, employee_id: int) -> None:
        index = self._index_of(employee_id)
        self._employees[index] = replace(self._employees[index], active=False)
        logger.info("Soft-deleted employee id=%s", employee_id)
        self._persist()

