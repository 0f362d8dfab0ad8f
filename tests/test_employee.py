import pytest

from staffroll.employee import (
    NAME_SIZE,
    TABLE_BORDER,
    Employee,
    compare_by_hours,
    compare_by_id,
    compare_by_salary,
    format_header,
)
from staffroll.linkedlist import LinkedList


def test_from_strings_reads_numbers():
    employee = Employee.from_strings("7", "Ana", "40", "1500")
    assert employee == Employee(7, "Ana", 40, 1500)


def test_from_strings_uses_leading_digits():
    employee = Employee.from_strings(" 12abc", "Luis", "8\r", "300 ")
    assert (employee.id, employee.hours, employee.salary) == (12, 8, 300)


@pytest.mark.parametrize(
    "fields",
    [("0", "Ana", "1", "1"), ("1", "Ana", "-2", "1"), ("1", "Ana", "1", "x")],
)
def test_from_strings_rejects_non_positive(fields):
    with pytest.raises(ValueError):
        Employee.from_strings(*fields)


def test_assignment_is_validated():
    employee = Employee(1, "Ana", 10, 500)
    with pytest.raises(ValueError):
        employee.salary = 0
    assert employee.salary == 500
    employee.hours = 20
    assert employee.hours == 20


def test_name_length_limit():
    with pytest.raises(ValueError):
        Employee(1, "a" * NAME_SIZE, 1, 1)
    assert Employee(1, "a" * (NAME_SIZE - 1), 1, 1).name == "a" * (NAME_SIZE - 1)


def test_format_row_pinned():
    row = Employee(1, "Ana", 10, 500).format_row()
    assert row == "|         1 |                  Ana |                   10 |        500  |"


def test_rows_align_with_border():
    rows = [Employee(3, "Bo", 1, 9).format_row(), Employee(99, "Carla", 160, 99999).format_row()]
    assert len(rows[0]) == len(rows[1]) == len(TABLE_BORDER)


def test_format_header():
    lines = format_header().split("\n")
    assert lines[0] == lines[2] == TABLE_BORDER
    assert "NOMBRE" in lines[1] and "SUELDO" in lines[1]
    assert len(lines[1].rstrip()) == len(TABLE_BORDER)


@pytest.mark.parametrize("compare", [compare_by_id, compare_by_hours, compare_by_salary])
def test_comparators_are_three_way(compare):
    small = Employee(1, "A", 1, 1)
    large = Employee(2, "B", 2, 2)
    assert compare(small, large) == -1
    assert compare(large, small) == 1
    assert compare(small, small) == 0


def test_sort_list_by_salary():
    staff = LinkedList(
        [Employee(1, "A", 5, 300), Employee(2, "B", 3, 100), Employee(3, "C", 9, 200)]
    )
    staff.sort(compare_by_salary, True)
    salaries = [employee.salary for employee in staff]
    assert salaries == sorted(salaries)
    staff.sort(compare_by_hours, False)
    hours = [employee.hours for employee in staff]
    assert hours == sorted(hours, reverse=True)