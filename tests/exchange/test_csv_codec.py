from __future__ import annotations

import pytest

from employee_records.core.enums import CsvMode
from employee_records.core.exceptions import ValidationError
from employee_records.exchange.csv_codec import decode, encode

HEADER = "ID,First Name,Last Name,Email,Phone,Department,Position,Salary,Hire Date,Active"


def test_encode_layout(employee_factory):
    text = encode(
        [
            employee_factory(1, first_name="Ann", last_name="Lee", email="a@x.com", phone="555",
                             department="Sales", position="Rep", salary=50000.0, hire_date="2020-01-02"),
            employee_factory(2, salary=1234.5, active=False),
        ]
    )

    lines = text.split("\n")
    assert lines[0] == HEADER
    assert lines[1] == '1,"Ann","Lee","a@x.com","555","Sales","Rep",50000,"2020-01-02",true'
    assert lines[2].endswith(',1234.5,"2024-01-01",false')


def test_encode_empty_collection_is_header_only():
    assert encode([]) == HEADER


def test_round_trip_keeps_fields(employee_factory):
    records = [
        employee_factory(1, first_name="Ann", last_name="Lee", department="Sales", position="Rep",
                         salary=50000.0, hire_date="2020-01-02"),
        employee_factory(2, first_name="Bo", last_name="Kim", salary=61000.25, active=False),
    ]

    decoded = decode(encode(records))

    for original, row in zip(records, decoded):
        assert row["id"] == original.id
        assert row["firstName"] == original.first_name
        assert row["lastName"] == original.last_name
        assert row["email"] == original.email
        assert row["department"] == original.department
        assert row["position"] == original.position
        assert row["salary"] == original.salary
        assert row["hireDate"] == original.hire_date
        assert row["active"] == original.active


def test_header_mode_maps_columns_by_name_in_any_order():
    text = 'email,"LAST NAME",first name,Nickname,salary\n"a@x.com","Lee","Ann","annie",\n'

    assert decode(text) == [{"email": "a@x.com", "lastName": "Lee", "firstName": "Ann", "salary": 0.0}]


def test_commas_inside_quotes_are_literal():
    text = 'First Name,Last Name,Email,Department\n"Ann","Lee, Jr.","a@x.com","R&D, Labs"'

    [row] = decode(text)

    assert row["lastName"] == "Lee, Jr."
    assert row["department"] == "R&D, Labs"


def test_embedded_quotes_survive_round_trip(employee_factory):
    [row] = decode(encode([employee_factory(1, position='The "Boss"')]))
    assert row["position"] == 'The "Boss"'


def test_encode_escapes_quotes_commas_and_newlines(employee_factory):
    text = encode([employee_factory(7, position='The "Boss", Sr.', phone="line1\nline2", salary=99.75)])

    header, row = text.split("\n", 1)
    assert header == HEADER
    assert row == '7,"First7","Last7","user7@example.com","line1\nline2","General","The ""Boss"", Sr.",99.75,"2024-01-01",true'
    assert not text.endswith("\n")


def test_header_mode_skips_short_and_blank_rows():
    text = "First Name,Last Name,Email\n\nAnn,Lee\nBo,Kim,b@x.com\r\n"

    assert decode(text) == [{"firstName": "Bo", "lastName": "Kim", "email": "b@x.com"}]


def test_fixed_mode_uses_column_order_and_needs_ten_cells():
    text = (
        "whatever,header,row\n"
        '7,"Ann","Lee","a@x.com","555","Sales","Rep",42000,"2020-01-02",true\n'
        '8,"Bo","Kim","b@x.com"\n'
    )

    rows = decode(text, CsvMode.FIXED)

    assert rows == [
        {
            "id": 7,
            "firstName": "Ann",
            "lastName": "Lee",
            "email": "a@x.com",
            "phone": "555",
            "department": "Sales",
            "position": "Rep",
            "salary": 42000.0,
            "hireDate": "2020-01-02",
            "active": True,
        }
    ]


def test_empty_text_decodes_to_nothing():
    assert decode("") == []
    assert decode(HEADER) == []


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        decode(HEADER, "columns")


def test_oversized_field_is_a_validation_error():
    with pytest.raises(ValidationError):
        decode("First Name\n\"" + "x" * 200_000 + "\"\n")
