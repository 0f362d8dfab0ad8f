"""The roster operations behind each entry of the main menu."""

from __future__ import annotations

from staffroll.console import Console
from staffroll.employee import (
    TABLE_BORDER,
    Employee,
    compare_by_hours,
    compare_by_id,
    compare_by_salary,
    format_header,
)
from staffroll.linkedlist import LinkedList
from staffroll.storage import parse_binary, parse_text, write_binary, write_text

RETRY_MESSAGE = "\nError, reingrese: "
NAME_LIMIT = 100
SALARY_RANGE = (1, 999999)

EDIT_MENU = (
    "\n\n------------------------------Menu de Modificaciones----------------------------------- \n\n"
    "1) Nombre\n"
    "2) Cantidad de horas trabajadas\n"
    "3) Sueldo\n"
    "4) Salir\n"
    "Opcion: "
)

SORT_MENU = (
    "------------------------------Menu de Ordenamiento-----------------------------------\n"
    "1) ID ascendente\n"
    "2) ID descendente\n"
    "3) Horas de trabajo ascendente\n"
    "4) Horas de trabajo descendente\n"
    "5) Sueldo de ascendente\n"
    "6) Sueldo de descendente\n"
    "7) Salir\n"
    "Opcion: "
)

_SORT_OPTIONS = {
    1: (compare_by_id, True),
    2: (compare_by_id, False),
    3: (compare_by_hours, True),
    4: (compare_by_hours, False),
    5: (compare_by_salary, True),
    6: (compare_by_salary, False),
}


def _say(text: str) -> None:
    print(text, end="", flush=True)


class Controller:
    """Holds the roster and runs each menu operation against it."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self.employees = LinkedList()
        self.last_id = 0

    def _show(self, employee: Employee, leading_newline: bool = True) -> None:
        _say(("\n" if leading_newline else "") + format_header() + "\n")
        _say(employee.format_row() + "\n")

    def _read_name(self) -> str:
        return self.console.read_alphabetic("\nIngrese Nombre: ", RETRY_MESSAGE, NAME_LIMIT, 3)

    def _read_hours(self) -> int:
        return self.console.read_positive_int("\nIngrese Horas Trabajadas: ", RETRY_MESSAGE, 3)

    def _read_salary(self) -> int:
        low, high = SALARY_RANGE
        return self.console.read_int_range("\nIngrese Sueldo: ", RETRY_MESSAGE, low, high, 3)

    def load_text(self, path) -> int:
        """Load employees from a CSV file into an empty roster; return how many were loaded."""
        if len(self.employees):
            _say("El archivo ya fue cargado!.\n\n")
            self.console.pause()
            return 0
        try:
            with open(path, encoding="utf-8") as stream:
                _say("Archivo abierto correctamente.\n\n")
                loaded = parse_text(stream)
        except OSError:
            _say("Error al abrir el archivo de texto, Corrobore si existe. \n\n")
            self.console.pause()
            return 0
        except ValueError as exc:
            _say(f"Error al leer el archivo: {exc}\n\n")
            self.console.pause()
            return 0
        for employee in loaded:
            self.employees.append(employee)
        if loaded:
            self.last_id = max(employee.id for employee in loaded)
        self.console.pause()
        return len(loaded)

    def load_binary(self, path) -> int:
        """Load employees from a binary file into an empty roster; return how many were loaded."""
        if len(self.employees):
            _say("El archivo ya fue cargado!.\n\n")
            self.console.pause()
            return 0
        try:
            with open(path, "rb") as stream:
                loaded = parse_binary(stream)
        except OSError:
            _say("Error al abrir el archivo de Binary, Corrobore si existe.\n")
            return 0
        except ValueError as exc:
            _say(f"Error al leer el archivo: {exc}\n")
            return 0
        for employee in loaded:
            self.employees.append(employee)
        _say("Archivo de texto abierto\n")
        return len(loaded)

    def add_employee(self) -> Employee | None:
        """Ask for a new employee's details and add it with the next id."""
        if not len(self.employees):
            _say("\n\nNo es posible dar de alta Nuevos empleados...\n")
            return None
        name = self._read_name()
        hours = self._read_hours()
        while hours <= 0:
            _say("ERROR, Solo numeros positivos\n")
            hours = self._read_hours()
        salary = self._read_salary()
        self.last_id += 1
        employee = Employee(self.last_id, name, hours, salary)
        self.employees.append(employee)
        _say("\n\ndatos cargados correctamente!\n")
        return employee

    def edit_employee(self) -> Employee | None:
        """Change one field of the employee with the id the user gives."""
        if not len(self.employees):
            _say("\n\nNo es posible modificar empleados...\nCargue un archivo previamente.\n\n")
            return None
        wanted = self.console.read_int(
            "\n Ingrese el ID del empleado a modificar: ", RETRY_MESSAGE
        )
        edited = None
        for employee in self.employees:
            if employee.id != wanted:
                continue
            self._show(employee)
            option = self.console.read_int_range(EDIT_MENU, RETRY_MESSAGE, 1, 4, 3)
            if option == 1:
                employee.name = self._read_name()
                _say("\nNombre cambiado con exito\n")
            elif option == 2:
                hours = self._read_hours()
                if hours > 0:
                    employee.hours = hours
                _say("\nHoras trabajadas cambiado con exito\n")
            elif option == 3:
                employee.salary = self._read_salary()
                _say("\nSueldo cambiado con exito\n")
            if option in (1, 2, 3):
                self._show(employee)
                self.console.pause()
            edited = employee
        if edited is None:
            _say("\nEmpleado no encontrado\n")
        return edited

    def remove_employee(self) -> Employee | None:
        """Remove the employee with the id the user gives, after confirmation."""
        removed = None
        if len(self.employees):
            wanted = self.console.read_int("Ingrese el ID que desea eliminar\n", RETRY_MESSAGE)
            for position, employee in enumerate(self.employees):
                if employee.id != wanted:
                    continue
                self._show(employee, leading_newline=False)
                if self.console.confirm(
                    "Desea continuar con la baja? Si[s] - No[n]: ", RETRY_MESSAGE, 3
                ):
                    removed = self.employees.pop(position)
                    _say("\nEmpleado eliminado correctamente\n")
                else:
                    _say("\n No se pudo eliminar el empleado\n")
                break
            if removed is None:
                _say("\nNo se encontro ID\n")
        else:
            _say("\n\nNo es borrar empleados...\nCargue un archivo previamente.\n\n")
        self.console.pause()
        return removed

    def list_employees(self) -> int:
        """Print the roster as a table; return the number of rows shown."""
        if not len(self.employees):
            _say("No hay datos a mostrar.\n")
            return 0
        _say(format_header() + "\n")
        for employee in self.employees:
            _say(employee.format_row() + "\n")
            _say(TABLE_BORDER + "\n")
        return len(self.employees)

    def sort_employees(self) -> bool:
        """Sort the roster by the criterion the user picks; return whether it was sorted."""
        if not len(self.employees):
            _say(" \nNo hay datos para ordenar \n")
            self.console.pause()
            return False
        option = self.console.read_int_range(SORT_MENU, "\nError, Reintente \n", 1, 7, 3)
        choice = _SORT_OPTIONS.get(option)
        if choice is None:
            return False
        compare, ascending = choice
        _say("Ordenando espere por favor\n")
        self.employees.sort(compare, ascending)
        _say("Ordenado correctamente\n")
        return True

    def save_text(self, path) -> bool:
        """Write the roster to a CSV file; the file is truncated even when nothing is saved."""
        try:
            with open(path, "w", encoding="utf-8") as stream:
                saved = bool(len(self.employees))
                if saved:
                    write_text(stream, self.employees)
        except OSError:
            saved = False
        _say(" \nArchivo guardado\n\n" if saved else " \nNo se pudo guardar el archivo\n")
        self.console.pause()
        return saved

    def save_binary(self, path) -> bool:
        """Write the roster to a binary file; the file is truncated even when nothing is saved."""
        try:
            with open(path, "wb") as stream:
                saved = bool(len(self.employees))
                if saved:
                    write_binary(stream, self.employees)
        except OSError:
            saved = False
        _say(
            " \nArchivo binario guardado con exito\n"
            if saved
            else " \nNo se pudo guardar el archivo\n"
        )
        self.console.pause()
        return saved