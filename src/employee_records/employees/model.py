from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from ..common.validators import clean_str, coerce_salary
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_POSITION

# Attribute name -> wire/persisted key.
FIELD_KEYS = {
    "id": "id",
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "department": "department",
    "position": "position",
    "salary": "salary",
    "hire_date": "hireDate",
    "profile_photo": "profilePhoto",
    "active": "active",
}
KEY_FIELDS = {key: attr for attr, key in FIELD_KEYS.items()}


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object; persistence and id assignment belong to the store.
    ``active=False`` marks a soft-deleted record.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str = ""
    department: str = DEFAULT_DEPARTMENT
    position: str = DEFAULT_POSITION
    salary: float = 0.0
    hire_date: str = ""
    profile_photo: str = ""
    active: bool = True

    def to_dict(self) -> dict:
        return {FIELD_KEYS[attr]: value for attr, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        """Build from the persisted camelCase form, tolerating missing keys."""
        return cls(
            id=int(data["id"]),
            first_name=clean_str(data.get("firstName")),
            last_name=clean_str(data.get("lastName")),
            email=clean_str(data.get("email")),
            phone=clean_str(data.get("phone")),
            department=clean_str(data.get("department"), DEFAULT_DEPARTMENT),
            position=clean_str(data.get("position"), DEFAULT_POSITION),
            salary=coerce_salary(data.get("salary", 0)),
            hire_date=clean_str(data.get("hireDate")),
            profile_photo=clean_str(data.get("profilePhoto")),
            active=data.get("active") is not False,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
