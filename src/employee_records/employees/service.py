from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..core.enums import CsvMode, SortDirection
from ..core.exceptions import ValidationError
from ..exchange import csv_codec
from . import query
from .model import Employee
from .query import EmployeeFilter, EmployeeStats, Page
from .store import EmployeeStore

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases behind the employee endpoints.

    Reads always work on active employees only; soft-deleted records are
    reachable through ``get`` alone.
    """

    def __init__(self, store: EmployeeStore):
        self._store = store

    def _sorted(self, records: list[Employee], sort_by: Optional[str], direction: Optional[str]) -> list[Employee]:
        if not sort_by:
            return records
        return query.sort_employees(records, sort_by, direction or SortDirection.ASC)

    def list_page(
        self,
        *,
        page: int,
        page_size: int,
        sort_by: Optional[str] = None,
        direction: Optional[str] = None,
    ) -> Page:
        records = self._sorted(self._store.list_active(), sort_by, direction)
        return query.paginate(records, page, page_size)

    def search(
        self,
        *,
        q: Optional[str] = None,
        criteria: Optional[EmployeeFilter] = None,
        sort_by: Optional[str] = None,
        direction: Optional[str] = None,
    ) -> list[Employee]:
        results = query.search(self._store.list_active(), q)
        if criteria is not None:
            results = query.filter_employees(results, criteria)
        return self._sorted(results, sort_by, direction)

    def get(self, employee_id: int) -> Employee:
        return self._store.get_by_id(employee_id)

    def create(self, payload: Mapping[str, Any]) -> Employee:
        return self._store.create(payload)

    def update(self, employee_id: int, payload: Mapping[str, Any]) -> Employee:
        return self._store.update(employee_id, payload)

    def delete(self, employee_id: int) -> None:
        self._store.soft_delete(employee_id)

    def departments(self) -> list[str]:
        return query.distinct_departments(self._store.list_active())

    def positions(self) -> list[str]:
        return query.distinct_positions(self._store.list_active())

    def stats(self) -> EmployeeStats:
        return query.stats(self._store.list_active())

    def export_csv(self) -> str:
        return csv_codec.encode(self._store.list_active())

    def import_csv(self, text: str, *, mode: CsvMode | str = CsvMode.HEADER) -> int:
        """Create one new active employee per CSV row; ids in the file are ignored."""
        if not text or not text.strip():
            raise ValidationError("CSV body is empty")
        try:
            mode = CsvMode(mode)
        except ValueError:
            raise ValidationError(f"Unknown import mode {mode!r}")

        rows = csv_codec.decode(text, mode)
        created = self._store.create_many(rows)
        logger.info("CSV import (%s mode): %d rows", mode.value, len(created))
        return len(created)
