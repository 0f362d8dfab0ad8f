"""The interactive main menu of the roster manager."""

from __future__ import annotations

import argparse

from staffroll.console import Console, RetriesExhausted
from staffroll.controller import Controller

MAIN_MENU = (
    "------------------------------Menu Principal----------------------------------- \n\n"
    "1) Cargar los datos de los empleados desde el archivo data.csv (modo texto).   \n"
    "2) Cargar los datos de los empleados desde el archivo data.csv (modo binario). \n"
    "3) Alta de empleado \n"
    "4) Modificar datos de empleado \n"
    "5) Baja de empleado \n"
    "6) Listar empleados \n"
    "7) Ordenar empleados \n"
    "8) Guardar los datos de los empleados en el archivo data.csv (modo texto).    \n"
    "9) Guardar los datos de los empleados en el archivo data.csv (modo binario).  \n"
    "10) Salir \n"
    "--------------------------------------------------------------------------------\n\n"
    "Opcion: "
)
EXIT_OPTION = 10


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="staffroll", description="Manage an employee roster.")
    parser.add_argument("--text-file", default="data.csv", help="CSV roster file")
    parser.add_argument("--binary-file", default="data.bin", help="binary roster file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the menu until the user chooses to leave or input ends."""
    args = _parse_args(argv)
    console = Console()
    controller = Controller(console)
    actions = {
        1: (lambda: controller.load_text(args.text_file), False),
        2: (lambda: controller.load_binary(args.binary_file), True),
        3: (controller.add_employee, True),
        4: (controller.edit_employee, True),
        5: (controller.remove_employee, False),
        6: (controller.list_employees, True),
        7: (controller.sort_employees, True),
        8: (lambda: controller.save_text(args.text_file), True),
        9: (lambda: controller.save_binary(args.binary_file), True),
    }
    try:
        while True:
            try:
                option = console.read_int_range(
                    MAIN_MENU, "\nError, reingrese: ", 1, EXIT_OPTION, 3
                )
                if option == EXIT_OPTION:
                    break
                action, pause_after = actions[option]
                action()
                if pause_after:
                    console.pause()
            except RetriesExhausted:
                continue
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())