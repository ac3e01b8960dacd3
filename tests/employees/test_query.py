from __future__ import annotations

import pytest

from employee_records.core.enums import SortDirection
from employee_records.core.exceptions import ValidationError
from employee_records.employees.query import (
    EmployeeFilter,
    distinct_departments,
    distinct_positions,
    filter_employees,
    paginate,
    search,
    sort_employees,
    stats,
)


@pytest.fixture
def staff(employee_factory):
    return [
        employee_factory(1, first_name="Ann", last_name="Lee", email="ann@corp.com", department="Engineering",
                         position="Developer", salary=72000, hire_date="2021-03-15"),
        employee_factory(2, first_name="Bo", last_name="Kim", email="bo@corp.com", department="Sales",
                         position="Manager", salary=50000, hire_date="2019-11-02"),
        employee_factory(12, first_name="cara", last_name="Diaz", email="cara@corp.com", department="engineering",
                         position="Developer", salary=28000, hire_date="2023-05-22"),
        employee_factory(3, first_name="Dan", last_name="Ode", email="dan@corp.com", department="Finance",
                         position="Analyst", salary=105000, hire_date="bad-date", active=False),
    ]


def test_paginate_middle_and_last_page(employee_factory):
    records = [employee_factory(i) for i in range(1, 26)]

    second = paginate(records, 2, 10)
    third = paginate(records, 3, 10)

    assert [e.id for e in second.items] == list(range(11, 21))
    assert second.total_count == 25
    assert [e.id for e in third.items] == list(range(21, 26))
    assert (third.page, third.page_size) == (3, 10)


def test_paginate_out_of_range_is_empty(employee_factory):
    page = paginate([employee_factory(1)], 5, 10)
    assert page.items == []
    assert page.total_count == 1


def test_paginate_clamps_bad_arguments(employee_factory):
    records = [employee_factory(i) for i in range(1, 15)]

    page = paginate(records, 0, 0)

    assert (page.page, page.page_size) == (1, 10)
    assert len(page.items) == 10


def test_empty_search_returns_input_unchanged(staff):
    assert search(staff, "") == staff
    assert search(staff, None) == staff


def test_search_is_case_insensitive_over_text_fields(staff):
    assert [e.id for e in search(staff, "ENGINEER")] == [1, 12]
    assert [e.id for e in search(staff, "kim")] == [2]
    assert [e.id for e in search(staff, "corp.com")] == [1, 2, 12, 3]


def test_search_matches_id_substring(staff):
    assert [e.id for e in search(staff, "12")] == [12]
    assert [e.id for e in search(staff, "2")] == [2, 12]


def test_filter_department_and_position_ignore_case(staff):
    result = filter_employees(staff, EmployeeFilter(department="ENGINEERING", position="developer"))
    assert [e.id for e in result] == [1, 12]


def test_filter_salary_bounds_are_inclusive(staff):
    result = filter_employees(staff, EmployeeFilter(min_salary=50000, max_salary=72000))
    assert [e.id for e in result] == [1, 2]


def test_filter_by_active_flag(staff):
    assert [e.id for e in filter_employees(staff, EmployeeFilter(active=False))] == [3]


def test_sort_salary_numeric(staff):
    assert [e.id for e in sort_employees(staff, "salary")] == [12, 2, 1, 3]
    assert [e.id for e in sort_employees(staff, "salary", "desc")] == [3, 1, 2, 12]


def test_sort_hire_date_puts_unparseable_first(staff):
    assert [e.id for e in sort_employees(staff, "hireDate")] == [3, 2, 1, 12]


def test_sort_strings_ignore_case(staff):
    assert [e.id for e in sort_employees(staff, "firstName")] == [1, 2, 12, 3]


def test_sort_is_stable_for_equal_keys(staff):
    assert [e.id for e in sort_employees(staff, "position")] == [3, 1, 12, 2]
    assert [e.id for e in sort_employees(staff, "position", "desc")] == [2, 1, 12, 3]


def test_sort_accepts_enum_members_and_any_case(staff):
    assert [e.id for e in sort_employees(staff, "salary", SortDirection.ASC)] == [12, 2, 1, 3]
    assert [e.id for e in sort_employees(staff, "salary", SortDirection.DESC)] == [3, 1, 2, 12]
    assert [e.id for e in sort_employees(staff, "salary", "DESC")] == [3, 1, 2, 12]


def test_sort_rejects_unknown_field_or_direction(staff):
    with pytest.raises(ValidationError):
        sort_employees(staff, "nope")
    with pytest.raises(ValidationError):
        sort_employees(staff, "salary", "sideways")


def test_stats_on_empty_input():
    s = stats([])

    assert s.total == 0
    assert s.average_salary == 0
    assert s.salary_ranges == {"0-30k": 0, "30k-50k": 0, "50k-70k": 0, "70k-100k": 0, "100k+": 0}


def test_stats_aggregates(staff):
    s = stats(staff)

    assert s.total == 4
    assert s.active == 3
    assert s.departments == 4
    assert s.positions == 3
    assert s.total_salary == 255000
    assert s.average_salary == 63750
    assert s.position_breakdown == {"Developer": 2, "Manager": 1, "Analyst": 1}
    assert s.salary_ranges == {"0-30k": 1, "30k-50k": 0, "50k-70k": 1, "70k-100k": 1, "100k+": 1}
    assert s.to_dict()["averageSalary"] == 63750


def test_distinct_lists_skip_inactive_and_empty(staff, employee_factory):
    records = staff + [employee_factory(20, department="", position="")]

    assert distinct_departments(records) == ["Engineering", "Sales", "engineering"]
    assert distinct_positions(records) == ["Developer", "Manager"]
