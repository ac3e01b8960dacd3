from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from ..core.exceptions import PersistenceError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonEmployeeRepository(EmployeeRepository):
    """Stores all employees (active and inactive) in one JSON array file.

    Every save overwrites the whole file. With ``atomic_writes`` the data is
    written to a temp file in the same directory and swapped in with
    ``os.replace``; otherwise the file is rewritten in place and a crash
    mid-write can leave it truncated.
    """

    def __init__(self, path: Path, *, atomic_writes: bool = False):
        self._path = Path(path)
        self._atomic_writes = atomic_writes

    def load_all(self) -> Sequence[Employee]:
        if not self._path.exists():
            logger.info("No data file at %s, starting with an empty collection", self._path)
            return []

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot read data file {self._path}: {e}") from e

        if not raw.strip():
            return []

        try:
            rows = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Data file {self._path} is not valid JSON: {e}") from e

        if not isinstance(rows, list):
            raise PersistenceError(f"Data file {self._path} must hold a JSON array")

        try:
            return [Employee.from_dict(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Data file {self._path} holds a malformed record: {e}") from e

    def save_all(self, employees: Sequence[Employee]) -> None:
        payload = json.dumps([e.to_dict() for e in employees], indent=2, ensure_ascii=False)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic_writes:
                self._replace_atomically(payload)
            else:
                self._path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write data file {self._path}: {e}") from e

    def _replace_atomically(self, payload: str) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=".employees-", suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
