"""Employee records, their table rendering and comparators."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

NAME_SIZE = 128
TABLE_BORDER = "+" + "-" * 71 + "+"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _positive(label: str) -> Callable[[Any], None]:
    def check(value: Any) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{label} must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"{label} must be positive, got {value}")

    return check


def _check_name(value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError(f"name must be a string, got {value!r}")
    if len(value.encode("utf-8")) >= NAME_SIZE:
        raise ValueError(f"name must be shorter than {NAME_SIZE} bytes")


_CHECKS: dict[str, Callable[[Any], None]] = {
    "id": _positive("id"),
    "name": _check_name,
    "hours": _positive("hours"),
    "salary": _positive("salary"),
}


@dataclass
class Employee:
    """An employee with an id, a name, hours worked and a salary."""

    id: int
    name: str
    hours: int
    salary: int

    def __setattr__(self, field: str, value: Any) -> None:
        check = _CHECKS.get(field)
        if check is not None:
            check(value)
        super().__setattr__(field, value)

    @classmethod
    def from_strings(cls, id_text: str, name: str, hours_text: str, salary_text: str) -> Employee:
        """Build an employee from text fields, reading each number from its leading digits."""
        return cls(
            _leading_int(id_text),
            name,
            _leading_int(hours_text),
            _leading_int(salary_text),
        )

    def format_row(self) -> str:
        """Render the employee as one row of the listing table."""
        return f"|{self.id:10d} | {self.name:>20} | {self.hours:20d} | {self.salary:10d}  |"


def format_header() -> str:
    """Render the bordered column titles of the listing table."""
    titles = f"|{'ID':>10}  {'NOMBRE':>20}  {'HORAS':>20}  {'SUELDO':>10}     | "
    return "\n".join([TABLE_BORDER, titles, TABLE_BORDER])


def _three_way(first: int, second: int) -> int:
    return (first > second) - (first < second)


def compare_by_id(first: Employee, second: Employee) -> int:
    """Return 1, -1 or 0 comparing ids."""
    return _three_way(first.id, second.id)


def compare_by_hours(first: Employee, second: Employee) -> int:
    """Return 1, -1 or 0 comparing hours worked."""
    return _three_way(first.hours, second.hours)


def compare_by_salary(first: Employee, second: Employee) -> int:
    """Return 1, -1 or 0 comparing salaries."""
    return _three_way(first.salary, second.salary)