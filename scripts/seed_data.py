from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from employee_records.config import get_settings_module
from employee_records.employees.json_employee_repository import JsonEmployeeRepository
from employee_records.employees.store import EmployeeStore
from employee_records.storage.bootstrap import ensure_data_dirs, resolve_paths, seed_demo_employees


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    paths = resolve_paths(
        settings.DATA_DIR,
        data_file_name=settings.DATA_FILE_NAME,
        uploads_dir_name=settings.UPLOADS_DIR_NAME,
    )
    ensure_data_dirs(paths)

    store = EmployeeStore(JsonEmployeeRepository(paths.data_file, atomic_writes=settings.ATOMIC_WRITES))
    seeded = seed_demo_employees(store)
    if seeded:
        print(f"OK: Seeded {seeded} demo employees -> {paths.data_file}")
    else:
        print(f"SKIP: {paths.data_file} already holds {len(store)} records")


if __name__ == "__main__":
    main()
