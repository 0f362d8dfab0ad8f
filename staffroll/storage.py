"""Reading and writing employee rosters as CSV text or fixed-size binary records."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from functools import partial
from typing import BinaryIO, TextIO

from staffroll.employee import NAME_SIZE, Employee

TEXT_HEADER = "id,nombre,horasTrabajadas,Sueldo"

# id, name buffer, hours worked, salary: little-endian 32-bit integers.
RECORD = struct.Struct(f"<i{NAME_SIZE}sii")


def parse_text(stream: TextIO) -> list[Employee]:
    """Read employees from CSV text, skipping the header line and blank lines.

    Raises ValueError naming the line when a row is malformed or holds
    values an employee cannot have.
    """
    lines = iter(stream)
    next(lines, None)
    employees = []
    for number, raw in enumerate(lines, start=2):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        fields = line.split(",", 3)
        if len(fields) != 4:
            raise ValueError(f"line {number}: expected 4 comma-separated fields")
        try:
            employees.append(Employee.from_strings(*fields))
        except ValueError as exc:
            raise ValueError(f"line {number}: {exc}") from exc
    return employees


def parse_binary(stream: BinaryIO) -> list[Employee]:
    """Read employees from fixed-size binary records; a trailing partial record is ignored."""
    employees = []
    for chunk in iter(partial(stream.read, RECORD.size), b""):
        if len(chunk) < RECORD.size:
            break
        ident, raw_name, hours, salary = RECORD.unpack(chunk)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        employees.append(Employee(ident, name, hours, salary))
    return employees


def write_text(stream: TextIO, employees: Iterable[Employee]) -> None:
    """Write a header line and one CSV row per employee."""
    stream.write(TEXT_HEADER + "\n")
    for employee in employees:
        stream.write(f"{employee.id},{employee.name},{employee.hours},{employee.salary}\n")


def write_binary(stream: BinaryIO, employees: Iterable[Employee]) -> None:
    """Write one fixed-size binary record per employee."""
    for employee in employees:
        stream.write(
            RECORD.pack(
                employee.id,
                employee.name.encode("utf-8"),
                employee.hours,
                employee.salary,
            )
        )