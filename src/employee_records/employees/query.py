"""Read-side helpers over a snapshot of employees.

All functions are pure: they take a sequence of employees and return new
lists or value objects, never touching the store.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import try_parse_iso_date
from ..core.constants import DEFAULT_PAGE_SIZE, SALARY_BUCKETS
from ..core.enums import SortDirection
from ..core.exceptions import ValidationError
from .model import KEY_FIELDS, Employee

SEARCH_FIELDS = ("first_name", "last_name", "email", "department", "position")


@dataclass(frozen=True)
class Page:
    items: list[Employee]
    page: int
    page_size: int
    total_count: int


@dataclass(frozen=True)
class EmployeeFilter:
    department: Optional[str] = None
    position: Optional[str] = None
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    active: Optional[bool] = None


@dataclass(frozen=True)
class EmployeeStats:
    total: int = 0
    active: int = 0
    departments: int = 0
    positions: int = 0
    total_salary: float = 0.0
    average_salary: float = 0.0
    department_breakdown: dict[str, int] = field(default_factory=dict)
    position_breakdown: dict[str, int] = field(default_factory=dict)
    salary_ranges: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "active": self.active,
            "departments": self.departments,
            "positions": self.positions,
            "totalSalary": self.total_salary,
            "averageSalary": self.average_salary,
            "departmentBreakdown": dict(self.department_breakdown),
            "positionBreakdown": dict(self.position_breakdown),
            "salaryRanges": dict(self.salary_ranges),
        }


def paginate(records: Sequence[Employee], page: int, page_size: int) -> Page:
    """Slice one page out of ``records``.

    Pages are 1-based. ``page < 1`` is treated as 1 and ``page_size < 1`` as the
    default size. A page past the end yields no items, not an error.
    """
    page = page if page >= 1 else 1
    page_size = page_size if page_size >= 1 else DEFAULT_PAGE_SIZE
    start = (page - 1) * page_size
    return Page(
        items=list(records[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_count=len(records),
    )


def search(records: Sequence[Employee], query: Optional[str]) -> list[Employee]:
    """Case-insensitive substring search over names, email, department, position and id."""
    if not query:
        return list(records)

    needle = query.lower()
    out: list[Employee] = []
    for e in records:
        if any(needle in str(getattr(e, attr) or "").lower() for attr in SEARCH_FIELDS):
            out.append(e)
        elif query in str(e.id):
            out.append(e)
    return out


def _same_text(left: str, right: str) -> bool:
    return (left or "").lower() == right.lower()


def filter_employees(records: Sequence[Employee], criteria: EmployeeFilter) -> list[Employee]:
    """Apply structured filters; department/position match exactly, ignoring case."""
    out: list[Employee] = []
    for e in records:
        if criteria.department and not _same_text(e.department, criteria.department):
            continue
        if criteria.position and not _same_text(e.position, criteria.position):
            continue
        if criteria.min_salary is not None and e.salary < criteria.min_salary:
            continue
        if criteria.max_salary is not None and e.salary > criteria.max_salary:
            continue
        if criteria.active is not None and e.active != criteria.active:
            continue
        out.append(e)
    return out


def _sort_key(field_name: str):
    if field_name == "salary":
        return lambda e: e.salary
    if field_name == "hireDate":
        return lambda e: try_parse_iso_date(e.hire_date) or date.min

    attr = KEY_FIELDS.get(field_name)
    if attr is None:
        raise ValidationError(f"Cannot sort by {field_name!r}")
    return lambda e: str(getattr(e, attr)).lower()


def sort_employees(
    records: Sequence[Employee],
    field_name: str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[Employee]:
    """Stable sort by a wire field name (``salary``, ``hireDate``, ``lastName``, ...)."""
    if not isinstance(direction, SortDirection):
        direction = str(direction).lower()
    try:
        direction = SortDirection(direction)
    except ValueError:
        raise ValidationError(f"Invalid sort direction {direction!r}")

    # sorted() keeps equal keys in input order for reverse=True as well.
    return sorted(records, key=_sort_key(field_name), reverse=direction == SortDirection.DESC)


def _salary_bucket(salary: float) -> str:
    for label, low, high in SALARY_BUCKETS:
        if salary >= low and (high is None or salary < high):
            return label
    return SALARY_BUCKETS[0][0]


def stats(records: Sequence[Employee]) -> EmployeeStats:
    if not records:
        return EmployeeStats(salary_ranges={label: 0 for label, _, _ in SALARY_BUCKETS})

    department_breakdown: dict[str, int] = {}
    position_breakdown: dict[str, int] = {}
    salary_ranges = {label: 0 for label, _, _ in SALARY_BUCKETS}
    total_salary = 0.0

    for e in records:
        department_breakdown[e.department] = department_breakdown.get(e.department, 0) + 1
        position_breakdown[e.position] = position_breakdown.get(e.position, 0) + 1
        salary_ranges[_salary_bucket(e.salary)] += 1
        total_salary += e.salary

    return EmployeeStats(
        total=len(records),
        active=sum(1 for e in records if e.active),
        departments=len(department_breakdown),
        positions=len(position_breakdown),
        total_salary=total_salary,
        average_salary=total_salary / len(records),
        department_breakdown=department_breakdown,
        position_breakdown=position_breakdown,
        salary_ranges=salary_ranges,
    )


def _distinct(values) -> list[str]:
    return sorted({v for v in values if v})


def distinct_departments(records: Sequence[Employee]) -> list[str]:
    """Departments of active employees; empty values are left out."""
    return _distinct(e.department for e in records if e.active)


def distinct_positions(records: Sequence[Employee]) -> list[str]:
    return _distinct(e.position for e in records if e.active)
