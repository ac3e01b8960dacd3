from __future__ import annotations

import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..core.exceptions import PersistenceError
from ..employees.store import EmployeeStore

DEMO_EMPLOYEES = (
    {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann.lee@example.com",
        "phone": "555-0101",
        "department": "Engineering",
        "position": "Developer",
        "salary": 72000,
        "hireDate": "2021-03-15",
    },
    {
        "firstName": "Omar",
        "lastName": "Haddad",
        "email": "omar.haddad@example.com",
        "phone": "555-0102",
        "department": "Sales",
        "position": "Account Manager",
        "salary": 54000,
        "hireDate": "2019-11-02",
    },
    {
        "firstName": "Mei",
        "lastName": "Tanaka",
        "email": "mei.tanaka@example.com",
        "department": "Finance",
        "position": "Analyst",
        "salary": 61000,
        "hireDate": "2022-07-01",
    },
    {
        "firstName": "Lucas",
        "lastName": "Silva",
        "email": "lucas.silva@example.com",
        "department": "Engineering",
        "position": "Team Lead",
        "salary": 105000,
        "hireDate": "2017-01-09",
    },
    {
        "firstName": "Grace",
        "lastName": "Okafor",
        "email": "grace.okafor@example.com",
        "department": "Human Resources",
        "salary": 28000,
        "hireDate": "2023-05-22",
    },
)


@dataclass(frozen=True)
class DataPaths:
    data_dir: Path
    data_file: Path
    uploads_dir: Path


def resolve_paths(data_dir: str | Path, *, data_file_name: str, uploads_dir_name: str) -> DataPaths:
    root = Path(data_dir).expanduser().resolve()
    return DataPaths(data_dir=root, data_file=root / data_file_name, uploads_dir=root / uploads_dir_name)


def ensure_data_dirs(paths: DataPaths) -> None:
    """Create the data and uploads directories; failure here aborts startup."""
    try:
        paths.data_dir.mkdir(parents=True, exist_ok=True)
        paths.uploads_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Cannot create data directory {paths.data_dir}: {e}") from e


def seed_demo_employees(store: EmployeeStore) -> int:
    """Insert demo employees only when the store holds no records at all."""
    if len(store):
        return 0
    return len(store.create_many(DEMO_EMPLOYEES))


def backup_data_file(data_file: Path, out_dir: Path, *, now: Optional[datetime] = None) -> Path:
    if not data_file.exists():
        raise PersistenceError(f"Nothing to back up: {data_file} does not exist")

    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{data_file.stem}_{ts}{data_file.suffix}"
    shutil.copy2(data_file, out_file)
    return out_file
