# staffroll

A small interactive console program for keeping a roll of employees, each with
an id, a name, the hours they have worked and a salary. The roll can be loaded
from and saved to a CSV text file or a binary file. By default these are
`data.csv` and `data.bin` in the current directory.

## Installing

    pip install .

## Running

    staffroll

Options:

- `--text-file PATH`: the CSV file used by the text load and save entries
  (default `data.csv`);
- `--binary-file PATH`: the file used by the binary load and save entries
  (default `data.bin`).

The main menu offers:

1. Load employees from the text file
2. Load employees from the binary file
3. Add an employee
4. Edit an employee's name, hours worked or salary
5. Remove an employee (asks for confirmation with `s` or `n`)
6. List employees
7. Sort employees by id, hours worked or salary, ascending or descending
8. Save employees to the text file
9. Save employees to the binary file
10. Quit

Notes on how the menu behaves:

- A file can only be loaded into an empty roll.
- Adding, editing, removing, listing and sorting need a non-empty roll, so a
  file has to be loaded first.
- New employees get the next id after the highest id in the loaded text file.
  Loading the binary file does not update that counter, so after a binary load
  new ids start again from 1.
- Names must be letters only (at most 100), hours worked must be positive and
  salaries must lie between 1 and 999999.
- Saving with an empty roll reports a failure, but still leaves the target file
  empty.
- When an answer is rejected too many times the program says so, waits for
  Enter and goes back to the main menu. The program ends at option 10 or at
  end of input.

## The text file

The CSV file starts with a header line and holds one employee per line:

    id,nombre,horasTrabajadas,Sueldo
    1,Ana,120,45000
    2,Bruno,80,30000

Blank lines are skipped. A line without four fields, or with an id, hours or
salary that is not a positive number, stops the load with an error naming the
line.

## The binary file

Each employee is a fixed-size record: a little-endian 32-bit id, the name
padded with zero bytes to 128 bytes (UTF-8), then 32-bit hours worked and
salary. A trailing partial record is ignored on reading.

## Using it as a library

The pieces the program is built from can be used on their own:

- `staffroll.linkedlist.LinkedList`, a singly linked list with `append`,
  `insert`, `remove_at`, `pop`, `clear`, `index_of`, `is_empty`,
  `contains_all`, `sub_list`, `clone` and `sort` by a three-way comparison
  function;
- `staffroll.employee.Employee`, a dataclass that rejects non-positive ids,
  hours and salaries, with `Employee.from_strings`, `format_row`, the
  module-level `format_header`, and the comparators `compare_by_id`,
  `compare_by_hours` and `compare_by_salary`;
- `staffroll.storage`, with `parse_text`, `parse_binary`, `write_text` and
  `write_binary`, working on open streams;
- `staffroll.console.Console`, prompts with validation and a limited number of
  retries (raising `RetriesExhausted`), taking optional input and output
  functions, and the validators `is_int_text`, `is_float_text`,
  `is_alphabetic`, `is_alphabetic_with_spaces` and `is_cuit`;
- `staffroll.controller.Controller`, the menu actions behind the program.

```python
from staffroll.employee import Employee, compare_by_salary
from staffroll.linkedlist import LinkedList

roll = LinkedList([
    Employee.from_strings("1", "Ana", "120", "45000"),
    Employee.from_strings("2", "Bruno", "80", "30000"),
])
roll.sort(compare_by_salary, True)
print([employee.name for employee in roll])  # ['Bruno', 'Ana']
```

## Running the tests

    pip install .[test]
    pytest