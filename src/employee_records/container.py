from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.service import EmployeeService
from .employees.store import EmployeeStore
from .storage.bootstrap import DataPaths, ensure_data_dirs, resolve_paths
from .users.repository import InMemoryUserRepository
from .users.service import AuthService
from .users.tokens import TokenRegistry


@dataclass(frozen=True)
class Container:
    paths: DataPaths

    employees_repo: JsonEmployeeRepository
    users_repo: InMemoryUserRepository
    tokens: TokenRegistry

    employee_store: EmployeeStore
    auth_service: AuthService
    employee_service: EmployeeService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    paths = resolve_paths(
        settings["DATA_DIR"],
        data_file_name=settings["DATA_FILE_NAME"],
        uploads_dir_name=settings["UPLOADS_DIR_NAME"],
    )
    ensure_data_dirs(paths)

    employees_repo = JsonEmployeeRepository(paths.data_file, atomic_writes=bool(settings.get("ATOMIC_WRITES", False)))
    users_repo = InMemoryUserRepository.from_credentials(settings["AUTH_USERS"])
    tokens = TokenRegistry()

    employee_store = EmployeeStore(employees_repo)
    auth_service = AuthService(users_repo, tokens)
    employee_service = EmployeeService(employee_store)

    return Container(
        paths=paths,
        employees_repo=employees_repo,
        users_repo=users_repo,
        tokens=tokens,
        employee_store=employee_store,
        auth_service=auth_service,
        employee_service=employee_service,
    )
