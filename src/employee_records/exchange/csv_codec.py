"""CSV exchange format for employee records.

Export writes a fixed header and one row per employee. Import understands two
contracts behind one ``decode`` call:

- ``CsvMode.HEADER`` maps columns by header name, case-insensitively and in
  any order. Unknown columns are ignored.
- ``CsvMode.FIXED`` is the legacy transfer layout: id, first name, last name,
  email, phone, department, position, salary, hire date, active. Rows with
  fewer than 10 cells are skipped.
"""
from __future__ import annotations

import csv
import io
from typing import Any, Callable, Iterable

from ..common.validators import coerce_salary
from ..core.constants import CSV_HEADER
from ..core.enums import CsvMode
from ..core.exceptions import ValidationError
from ..employees.model import Employee

FIXED_COLUMN_KEYS = (
    "id",
    "firstName",
    "lastName",
    "email",
    "phone",
    "department",
    "position",
    "salary",
    "hireDate",
    "active",
)


def _parse_id(value: str) -> int:
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        return 0


def _parse_active(value: str) -> bool:
    return value.lower() == "true"


_PARSERS: dict[str, Callable[[str], Any]] = {
    "id": _parse_id,
    "salary": coerce_salary,
    "active": _parse_active,
}

# Header name (lower case) -> (wire key, cell parser)
_HEADER_COLUMNS: dict[str, tuple[str, Callable[[str], Any]]] = {
    title.lower(): (key, _PARSERS.get(key, str)) for title, key in zip(CSV_HEADER, FIXED_COLUMN_KEYS)
}


class _CsvBool(int):
    """Numeric cell, so QUOTE_NONNUMERIC leaves it bare, printed as true/false."""

    def __str__(self) -> str:
        return "true" if self else "false"


def _number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else float(value)


def encode_row(e: Employee) -> list:
    return [
        e.id,
        e.first_name,
        e.last_name,
        e.email,
        e.phone or "",
        e.department or "",
        e.position or "",
        _number(e.salary),
        e.hire_date or "",
        _CsvBool(bool(e.active)),
    ]


def encode(records: Iterable[Employee]) -> str:
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(CSV_HEADER)
    csv.writer(buf, lineterminator="\n", quoting=csv.QUOTE_NONNUMERIC).writerows(encode_row(e) for e in records)
    return buf.getvalue()[:-1]


def _rows(text: str) -> list[list[str]]:
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff"), newline=""))
    try:
        return [row for row in reader if any(cell.strip() for cell in row)]
    except csv.Error as e:
        raise ValidationError(f"Malformed CSV at line {reader.line_num}: {e}") from e


def _decode_by_header(rows: list[list[str]]) -> list[dict]:
    header = [cell.replace('"', "").strip().lower() for cell in rows[0]]
    out: list[dict] = []
    for row in rows[1:]:
        if len(row) < len(header):
            continue
        record: dict[str, Any] = {}
        for name, cell in zip(header, row):
            column = _HEADER_COLUMNS.get(name)
            if column is None:
                continue
            key, parse = column
            record[key] = parse(cell.strip())
        out.append(record)
    return out


def _decode_fixed(rows: list[list[str]]) -> list[dict]:
    out: list[dict] = []
    for row in rows[1:]:
        if len(row) < len(FIXED_COLUMN_KEYS):
            continue
        out.append(
            {key: _PARSERS.get(key, str)(cell.strip()) for key, cell in zip(FIXED_COLUMN_KEYS, row)}
        )
    return out


def decode(text: str, mode: CsvMode | str = CsvMode.HEADER) -> list[dict]:
    """Parse CSV text into partial employee dicts keyed by wire names.

    The first non-blank row is always the header. Blank lines are skipped.
    """
    mode = CsvMode(mode)
    rows = _rows(text or "")
    if not rows:
        return []
    if mode == CsvMode.FIXED:
        return _decode_fixed(rows)
    return _decode_by_header(rows)
