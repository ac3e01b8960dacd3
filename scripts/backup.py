"""Back up the employee data file.

Copies ``<DATA_DIR>/employees.json`` to ``backups/employees_<timestamp>.json``
at the repository root.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from employee_records.config import get_settings_module
from employee_records.core.exceptions import PersistenceError
from employee_records.storage.bootstrap import backup_data_file, resolve_paths


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    paths = resolve_paths(
        settings.DATA_DIR,
        data_file_name=settings.DATA_FILE_NAME,
        uploads_dir_name=settings.UPLOADS_DIR_NAME,
    )
    out_dir = Path(__file__).resolve().parents[1] / "backups"

    try:
        out_file = backup_data_file(paths.data_file, out_dir)
    except PersistenceError as e:
        raise SystemExit(str(e))
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
